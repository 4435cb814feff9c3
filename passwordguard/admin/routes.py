"""Admin routes for inspecting and trying out the password policy."""
from flask import jsonify, request

from passwordguard.admin import admin_bp
from passwordguard.policy.settings import OPTIONS
from passwordguard.security import get_guard


@admin_bp.route('/policy', methods=['GET'])
def show_policy():
    """Global policy values with their descriptions."""
    guard = get_guard()
    values = guard.global_settings()
    return jsonify({
        'settings': [OPTIONS[name].describe(values[name]) for name in OPTIONS],
        'report_all': guard.report_all,
        'hooks': len(guard.hooks),
    }), 200


@admin_bp.route('/policy/check', methods=['POST'])
def check_policy():
    """
    Dry-run a password against the global policy.

    Always returns the complete verdict; nothing is logged or stored and
    log_only has no effect here.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    password = data.get('password')
    username = data.get('username')

    if not isinstance(password, str):
        return jsonify({'message': 'password is required'}), 400
    if username is not None and not isinstance(username, str):
        return jsonify({'message': 'username must be a string'}), 400

    guard = get_guard()
    verdict = guard.evaluate(username, password, guard.policy_for())
    return jsonify(verdict.to_dict()), 200
