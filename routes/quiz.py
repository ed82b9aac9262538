# routes/quiz.py
from flask import Blueprint, request, jsonify, current_app

from controllers.quiz_controller import sample_questions

bp = Blueprint('quiz', __name__)


@bp.route("/questions", methods=["GET"])
def questions():
    try:
        current_app.logger.debug("Fetching questions...")
        sampled = sample_questions()
    except Exception:
        current_app.logger.exception("Error fetching questions")
        return jsonify({"error": "Internal Server Error"}), 500

    current_app.logger.debug("Fetched %d questions", len(sampled))
    return jsonify(sampled)


@bp.route("/submit-answers", methods=["POST"])
def submit_answers():
    answers = request.get_json(force=True, silent=True)
    current_app.logger.info("Received answers: %s", answers)
    return jsonify({"success": True})
