"""Admin blueprint for policy introspection routes."""
from flask import Blueprint

from passwordguard.config import config

admin_bp = Blueprint('admin', __name__, url_prefix=f"{config.API_PREFIX}/admin")

from passwordguard.admin import routes  # noqa: E402,F401
