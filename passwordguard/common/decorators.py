from functools import wraps

from flask import jsonify


def role_required(f):
    """
    Decorator that loads the role named in the URL.

    The view receives the Role instance instead of the name; unknown roles
    get a 404 JSON response.
    """
    @wraps(f)
    def decorated_function(name, *args, **kwargs):
        from passwordguard.roles.models import Role

        role = Role.query.filter_by(name=name).first()
        if role is None:
            return jsonify({"message": f'role "{name}" does not exist'}), 404
        return f(role, *args, **kwargs)
    return decorated_function
