# jobly/services/tokens.py
"""
Bearer tokens carry three claims: the user id (as the JWT subject), the role
and the display name. Tokens are signed with JWT_SECRET_KEY and, unless
JWT_ACCESS_TOKEN_EXPIRES is configured, never expire; rotating the secret is
the only way to revoke them.
"""
from flask_jwt_extended import create_access_token, decode_token, get_jwt
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from jobly.errors import TokenInvalidError


def issue_token(claims):
    """Sign ``{"id", "role", "name"}`` into a token. Needs an app context."""
    return create_access_token(
        identity=str(claims["id"]),
        additional_claims={
            "role": claims["role"],
            "name": claims["name"],
        },
    )


def claims_from_payload(payload):
    try:
        return {
            "id": int(payload["sub"]),
            "role": payload["role"],
            "name": payload.get("name"),
        }
    except (KeyError, TypeError, ValueError) as e:
        raise TokenInvalidError() from e


def verify_token(token):
    """Return the claims of ``token`` or raise TokenInvalidError."""
    try:
        payload = decode_token(token)
    except (PyJWTError, JWTExtendedException) as e:
        raise TokenInvalidError() from e
    return claims_from_payload(payload)


def current_claims():
    """Claims of the token verified by ``jwt_required`` for this request."""
    return claims_from_payload(get_jwt())
