from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from jobly import databases
from jobly.lifecycle import get_db
from jobly.services.tokens import current_claims

applications_bp = Blueprint("applications", __name__)


@applications_bp.route("/apply/<int:job_id>", methods=["POST"])
@jwt_required()
def apply(job_id):
    databases.apply_to_job(get_db(), job_id, current_claims())
    return jsonify({"message": "Application submitted"}), 201


@applications_bp.route("/my-applications", methods=["GET"])
@jwt_required()
def my_applications():
    caller = current_claims()
    return jsonify(databases.list_applications_for_user(get_db(), caller["id"]))
