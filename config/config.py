# config/config.py
import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

class Config:
    # --- App settings ---
    DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("PORT", 9000))

    # --- CORS Settings ---
    # Accept comma-separated values: e.g., "http://localhost:3000,http://127.0.0.1:3000"
    ALLOWED_ORIGINS = [
        o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    ]

    # --- Database ---
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./quiz.db")
