from flask import Blueprint, jsonify

from jobly.lifecycle import get_db
from jobly.routes._helpers import json_body
from jobly.services.auth import AuthService

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body("name", "email", "password", "role")

    AuthService.register(
        get_db(),
        data["name"],
        data["email"],
        data["password"],
        data["role"],
    )
    return jsonify({"message": "User created"}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body("email", "password")

    token, user = AuthService.authenticate_user(get_db(), data["email"], data["password"])
    return jsonify({"token": token, "user": user}), 200
