from flask import request

from jobly.errors import ValidationError


def json_body(*required):
    """Parsed JSON object of the request; every name in ``required`` must be non-empty."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("No JSON data provided")

    missing = [name for name in required if not data.get(name)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    # values are bound straight into SQL, which only takes scalars
    for name, value in data.items():
        if value is not None and not isinstance(value, (str, int, float)):
            raise ValidationError(f"Field '{name}' must be a string")
    return data
