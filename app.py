"""
Portfolio - Main Application Entry Point
Application Factory Pattern: public portfolio site plus the admin dashboard
and JSON API that manage its content.
"""

import os
from datetime import datetime
from flask import Flask, jsonify, render_template, request
from config import get_config
from extensions import db, login_manager

from blueprints.api import api_bp
from blueprints.auth import auth_bp
from blueprints.dashboard import dashboard_bp
from blueprints.pages import pages_bp


def create_app(config_name=None, test_config=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        test_config (dict): Settings applied over the selected configuration (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if test_config:
        app.config.update(test_config)

    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # Initialize extensions with app
    initialize_extensions(app)
    check_environment(app)

    # Register Jinja filters
    from utils.helpers import split_tech_stack, format_date_range
    app.jinja_env.filters['tech_list'] = split_tech_stack
    app.jinja_env.filters['date_range'] = format_date_range

    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    # Registers the Flask-Login user loader and unauthorized handler
    from utils import auth  # noqa: F401

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401
            db.create_all()
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def check_environment(app):
    """Warn about optional settings that are missing"""
    groups = {
        'media uploads': ('CLOUDINARY_CLOUD_NAME', 'CLOUDINARY_API_KEY', 'CLOUDINARY_API_SECRET'),
        'admin bootstrap': ('ADMIN_EMAIL', 'ADMIN_PASSWORD'),
        'initialization endpoint': ('INIT_SECRET',),
    }
    for feature, keys in groups.items():
        missing = [key for key in keys if not app.config.get(key)]
        if missing:
            app.logger.warning(f"{', '.join(missing)} not set; {feature} disabled")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(pages_bp)


def register_error_handlers(app):
    """Register custom error handlers: JSON under /api/, HTML elsewhere"""

    def wants_json():
        return request.path.startswith('/api/')

    @app.errorhandler(404)
    def page_not_found(e):
        if wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('error.html', code=404, message='Page not found.'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        if wants_json():
            return jsonify({'error': 'Method not allowed'}), 405
        return render_template('error.html', code=405, message='Method not allowed.'), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('error.html', code=500, message='Something went wrong.'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        return {'current_year': datetime.now().year}

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        if not app.debug:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
