from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv
from flask_migrate import Migrate
from flask_compress import Compress

# Load environment variables early so config is available for blueprint creation
load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
compress = Compress()


def create_app(test_config: dict = None) -> Flask:
    """
    Application factory for the Flask app.
    Loads environment variables, configures the database,
    installs the password policy checker and registers blueprints.

    Args:
        test_config: Extra Flask config values applied last (used by tests)
    """
    # Re-initialize config to ensure latest .env values are loaded
    from passwordguard.config import Config
    app_config = Config()

    # Validate configuration
    app_config.validate()

    app = Flask(__name__)

    app.config["SECRET_KEY"] = app_config.SECRET_KEY
    app.config["SQLALCHEMY_DATABASE_URI"] = app_config.SQLALCHEMY_DATABASE_URI
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = app_config.SQLALCHEMY_TRACK_MODIFICATIONS
    app.config["SQLALCHEMY_ECHO"] = app_config.SQLALCHEMY_ECHO
    if app_config.SQLALCHEMY_DATABASE_URI.startswith("mysql"):
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
            "pool_size": 10,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
        }

    # Response compression settings
    app.config["COMPRESS_MIMETYPES"] = ['application/json']
    app.config["COMPRESS_MIN_SIZE"] = 500  # Only compress responses > 500 bytes

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app_config.LOG_LEVEL)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    compress.init_app(app)

    # Install the password policy checker
    from passwordguard.security import init_security
    init_security(app, app_config)

    # Register blueprints
    from passwordguard.roles import roles_bp
    app.register_blueprint(roles_bp)

    from passwordguard.admin import admin_bp
    app.register_blueprint(admin_bp)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    @app.errorhandler(404)
    def handle_404(e):
        """Handle 404 errors - return JSON for API routes."""
        path = request.path
        method = request.method
        app.logger.warning(f"404 error: {method} {path}")
        if path.startswith(app_config.API_PREFIX + "/"):
            return jsonify({
                'message': f'Route not found: {method} {path}',
                'path': path,
                'method': method
            }), 404
        return f"Page not found: {path}", 404

    @app.errorhandler(405)
    def handle_405(e):
        """Handle 405 Method Not Allowed - return JSON for API routes."""
        path = request.path
        method = request.method
        app.logger.warning(f"405 error: {method} {path}")
        if path.startswith(app_config.API_PREFIX + "/"):
            return jsonify({
                'message': f'Method not allowed: {method} {path}',
                'path': path,
                'method': method
            }), 405
        return e

    # Create tables if they do not exist
    with app.app_context():
        from passwordguard.roles.models import Role, RoleSetting  # noqa: F401
        db.create_all()

    return app
