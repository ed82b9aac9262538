# app.py
import json

import click
from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from config.config import Config
from controllers.quiz_controller import seed_questions
from db.database import init_db, ping_db
from routes.auth import bp as auth_bp
from routes.details import bp as details_bp
from routes.quiz import bp as quiz_bp

def create_app():
    app = Flask(__name__)

    # Load config values from Config
    app.config["DEBUG"] = Config.DEBUG

    # CORS
    CORS(app, origins=Config.ALLOWED_ORIGINS)

    # Ensure DB schema exists
    init_db()

    # register blueprints
    for bp in (auth_bp, details_bp, quiz_bp):
        app.register_blueprint(bp, url_prefix="/api")

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        # 404/405 and friends keep their own responses
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("Unhandled error: %s", e)
        return "Something went wrong!", 500, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/health/db", methods=["GET"])
    def health_db():
        """Simple DB health check endpoint.
        Returns 200 if DB is reachable and a basic select 1 works, otherwise returns 503.
        """
        try:
            ping_db()
            return jsonify({"db": "ok"})
        except Exception as e:
            app.logger.exception("DB health check failed: %s", e)
            return jsonify({"db": "error", "error": str(e)}), 503

    @app.cli.command("seed-questions")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    def seed_questions_command(path):
        """Load a JSON array of questions into the question bank."""
        with open(path, encoding="utf-8") as f:
            items = json.load(f)
        if not isinstance(items, list):
            raise click.BadParameter("expected a JSON array of questions", param_hint="PATH")
        try:
            count = seed_questions(items)
        except ValidationError as ve:
            raise click.ClickException(f"Invalid question data: {ve}")
        app.logger.info("Seeded %d questions from %s", count, path)
        click.echo(f"Inserted {count} questions.")

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.APP_HOST, port=Config.APP_PORT, debug=Config.DEBUG)
