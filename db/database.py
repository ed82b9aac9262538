# db/database.py
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, scoped_session
from config.config import Config

# Create engine
engine_args = {}
if Config.DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}

engine = create_engine(Config.DATABASE_URL, echo=False, **engine_args)

# Session
SessionLocal = scoped_session(
    sessionmaker(autocommit=False, autoflush=False, bind=engine)
)

def init_db():
    """Create all tables if not exist."""
    from models.base import Base
    # register every mapped class on Base.metadata
    from models import question, user, user_details  # noqa: F401
    Base.metadata.create_all(bind=engine)


def ping_db():
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
