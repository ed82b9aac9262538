# routes/details.py
import io

from flask import Blueprint, request, jsonify, current_app, send_file

from controllers import details_controller

bp = Blueprint('details', __name__)


def _server_error():
    return jsonify({"error": "Internal Server Error"}), 500


@bp.route("/approval-status/<name>", methods=["GET"])
def approval_status(name):
    try:
        approved = details_controller.approval_by_name(name)
    except Exception:
        current_app.logger.exception("Error checking approval status for %s", name)
        return _server_error()
    return jsonify({"approved": approved})


@bp.route("/check-approval/<user_id>", methods=["GET"])
def check_approval(user_id):
    try:
        approved = details_controller.approval_by_id(user_id)
    except Exception:
        current_app.logger.exception("Error checking approval status for id=%s", user_id)
        return _server_error()
    return jsonify({"approved": approved})


@bp.route("/approve-user/<user_id>", methods=["PUT"])
def approve_user(user_id):
    try:
        matched = details_controller.approve(user_id)
    except Exception:
        current_app.logger.exception("Error approving user id=%s", user_id)
        return _server_error()

    if not matched:
        current_app.logger.info("approve-user: no details record with id=%s", user_id)
    return jsonify({"message": "User approved successfully"}), 200


@bp.route("/add-details", methods=["POST"])
def add_details():
    try:
        validated = details_controller.parse_details(request.form["data"])
        cv = request.files["cv"].read()
        details_id = details_controller.save_details(validated, cv)
    except Exception:
        current_app.logger.exception("Error adding user details")
        return _server_error()

    current_app.logger.debug("Stored details id=%s (%d bytes cv)", details_id, len(cv))
    return jsonify({"message": "User details added successfully"}), 201


@bp.route("/user-details", methods=["GET"])
def user_details():
    try:
        rows = details_controller.list_details()
    except Exception:
        current_app.logger.exception("Error fetching user details")
        return _server_error()
    return jsonify(rows)


@bp.route("/download-cv/<user_id>", methods=["GET"])
def download_cv(user_id):
    try:
        filename, cv = details_controller.get_cv(user_id)
    except Exception:
        # RecordNotFound lands here too
        current_app.logger.exception("Error downloading CV for id=%s", user_id)
        return _server_error()

    return send_file(
        io.BytesIO(cv),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=filename,
    )
