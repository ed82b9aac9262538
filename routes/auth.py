# routes/auth.py
from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError

from controllers.auth_controller import (
    password_mismatch_errors,
    process_login,
    process_signup,
    validation_error_map,
)
from utils.errors import ConflictError, InvalidCredentials

bp = Blueprint('auth', __name__)


def _json_body():
    payload = request.get_json(force=True, silent=True)
    return payload if isinstance(payload, dict) else None


@bp.route("/signup", methods=["POST"])
def signup():
    payload = _json_body()
    if payload is None:
        return jsonify({"error": "Invalid JSON"}), 400

    mismatch = password_mismatch_errors(payload)
    if mismatch:
        return jsonify({"errors": mismatch}), 400

    try:
        process_signup(payload)
    except ValidationError as ve:
        return jsonify({"errors": validation_error_map(ve)}), 400
    except ConflictError as ce:
        return jsonify({"error": str(ce)}), 400
    except Exception:
        current_app.logger.exception("Signup failed")
        return jsonify({"error": "Internal Server Error"}), 500

    return jsonify({"message": "User registered successfully"})


@bp.route("/login", methods=["POST"])
def login():
    payload = _json_body()
    if payload is None:
        return jsonify({"error": "Invalid JSON"}), 400

    try:
        result = process_login(payload.get("username"), payload.get("password"))
    except InvalidCredentials as ic:
        return jsonify({"error": str(ic)}), 400
    except Exception:
        current_app.logger.exception("Login failed")
        return jsonify({"error": "Internal Server Error"}), 500

    return jsonify(result)
