from flask import Blueprint

from passwordguard.config import config

# Blueprint for role and credential management endpoints
roles_bp = Blueprint("roles", __name__, url_prefix=f"{config.API_PREFIX}/roles")

# Import routes so that they are registered with the blueprint
from passwordguard.roles import routes  # noqa: E402,F401
