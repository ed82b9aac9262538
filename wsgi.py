# wsgi.py
"""
WSGI entry point.
This loads the Flask app from app.py using the create_app() factory.
"""

from app import create_app
from config.config import Config

# WSGI callable that servers expect
application = create_app()

# Optional alias so you can run "python wsgi.py" directly
app = application

if __name__ == "__main__":
    # Local development server
    app.run(host="127.0.0.1", port=Config.APP_PORT, debug=True)
