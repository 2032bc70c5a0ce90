from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from jobly import databases
from jobly.errors import ForbiddenError
from jobly.lifecycle import get_db
from jobly.routes._helpers import json_body
from jobly.services.tokens import current_claims

jobs_bp = Blueprint("jobs", __name__)


@jobs_bp.route("/jobs", methods=["GET"])
def list_jobs():
    return jsonify(databases.list_jobs(get_db()))


@jobs_bp.route("/jobs", methods=["POST"])
@jwt_required()
def create_job():
    caller = current_claims()
    # role first: a candidate gets 403 whatever the body
    if caller["role"] not in databases.JOB_POSTER_ROLES:
        raise ForbiddenError("Only employers can post jobs")

    data = json_body("title", "company")
    fields = {name: data.get(name) for name in databases.JOB_FIELDS}

    job_id = databases.create_job(get_db(), fields, caller)
    return jsonify({"message": "Job posted", "id": job_id}), 201
