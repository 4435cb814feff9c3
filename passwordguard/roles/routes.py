from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from passwordguard import db
from passwordguard.common.decorators import role_required
from passwordguard.policy.settings import (
    format_option_value,
    normalize_option_name,
    parse_option_value,
)
from passwordguard.roles import roles_bp
from passwordguard.roles.models import Role, RoleSetting
from passwordguard.roles.utils import is_valid_role_name, stored_password
from passwordguard.security import SecurityLogger, get_guard


def _password_field(data: dict):
    """
    Return (password, error_response). Absent and null both mean no password.
    """
    password = data.get("password")
    if password is not None and not isinstance(password, str):
        return None, (jsonify({"message": "password must be a string or null"}), 400)
    return password, None


def _effective_settings(role: Role) -> dict:
    guard = get_guard()
    overrides = {
        name: parse_option_value(name, raw)
        for name, raw in role.setting_overrides().items()
    }
    return {
        "role": role.name,
        "overrides": overrides,
        "effective": guard.policy_for(role.setting_overrides()).as_dict(),
    }


@roles_bp.route("/", methods=["GET"])
def list_roles():
    roles = Role.query.order_by(Role.name).all()
    return jsonify({"roles": [r.to_dict() for r in roles]}), 200


@roles_bp.route("/", methods=["POST"])
def create_role():
    """
    Create a role, optionally with a password (CREATE ROLE ... PASSWORD).
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    name = (data.get("name") or "").strip()

    if not name:
        return jsonify({"message": "Role name is required"}), 400

    if not is_valid_role_name(name):
        return jsonify({
            "message": "Role name must start with a letter or underscore and contain "
                       "only letters, digits, '_' or '$' (max 63 characters)"
        }), 400

    password, error = _password_field(data)
    if error:
        return error

    login = data.get("login", True)
    if not isinstance(login, bool):
        return jsonify({"message": "login must be a boolean"}), 400

    if Role.query.filter_by(name=name).first():
        return jsonify({"message": f'role "{name}" already exists'}), 409

    # New roles have no overrides yet, so the global policy applies
    password_type = get_guard().check(name, password)

    role = Role(name=name, login=login)
    if password is not None:
        role.password_hash = stored_password(password, password_type)

    try:
        db.session.add(role)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error while creating role")
        return jsonify({"message": "Internal server error while creating role"}), 500

    if password is not None:
        SecurityLogger.log_password_change(name, "created")

    return jsonify({"message": "Role created", "role": role.to_dict()}), 201


@roles_bp.route("/<name>", methods=["GET"])
@role_required
def get_role(role):
    return jsonify({"role": role.to_dict()}), 200


@roles_bp.route("/<name>", methods=["DELETE"])
@role_required
def drop_role(role):
    try:
        db.session.delete(role)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error while dropping role")
        return jsonify({"message": "Internal server error while dropping role"}), 500
    return jsonify({"message": "Role dropped"}), 200


@roles_bp.route("/<name>/password", methods=["PUT"])
@role_required
def alter_password(role):
    """
    Change or clear a role's password (ALTER ROLE ... PASSWORD).

    A null password clears it and bypasses the policy check.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "password" not in data:
        return jsonify({"message": "password field is required (use null to clear)"}), 400

    password, error = _password_field(data)
    if error:
        return error

    if password is None:
        role.password_hash = None
        action = "cleared"
    else:
        password_type = get_guard().check(role.name, password, role.setting_overrides())
        role.password_hash = stored_password(password, password_type)
        action = "changed"

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error while changing role password")
        return jsonify({"message": "Internal server error while changing password"}), 500

    SecurityLogger.log_password_change(role.name, action)
    return jsonify({"message": f"Password {action}", "role": role.to_dict()}), 200


@roles_bp.route("/<name>/settings", methods=["GET"])
@role_required
def get_role_settings(role):
    return jsonify(_effective_settings(role)), 200


@roles_bp.route("/<name>/settings", methods=["PUT"])
@role_required
def set_role_settings(role):
    """
    Set per-role policy overrides (ALTER ROLE ... SET passwordguard.x = y).

    Every value is validated before anything is written.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"message": "Provide at least one option to set"}), 400

    parsed = {}
    for raw_name, raw_value in data.items():
        option = normalize_option_name(raw_name)
        parsed[option] = parse_option_value(option, raw_value)

    existing = {s.option: s for s in role.settings}
    for option, value in parsed.items():
        stored = format_option_value(value)
        if option in existing:
            existing[option].value = stored
        else:
            role.settings.append(RoleSetting(option=option, value=stored))

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error while saving role settings")
        return jsonify({"message": "Internal server error while saving settings"}), 500

    for option, value in parsed.items():
        SecurityLogger.log_setting_change(role.name, option, format_option_value(value))

    return jsonify(_effective_settings(role)), 200


@roles_bp.route("/<name>/settings/<option>", methods=["DELETE"])
@role_required
def reset_role_setting(role, option):
    """Remove one override (ALTER ROLE ... RESET). Resetting an unset option is a no-op."""
    option = normalize_option_name(option)
    setting = next((s for s in role.settings if s.option == option), None)

    if setting is not None:
        role.settings.remove(setting)
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("Error while resetting role setting")
            return jsonify({"message": "Internal server error while resetting setting"}), 500
        SecurityLogger.log_setting_change(role.name, option)

    return jsonify(_effective_settings(role)), 200

