"""
Portfolio - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its extensions,
configuration and hooks. All route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db

# Import all blueprints
from blueprints.api import api_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    from utils.helpers import tag_class
    app.jinja_env.filters['tag_class'] = tag_class

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    def is_api_request():
        return request.path.startswith('/api/')

    @app.errorhandler(HTTPException)
    def http_error(e):
        if is_api_request():
            return jsonify({'success': False, 'message': e.description}), e.code
        if e.code == 404:
            return render_template('404.html'), 404
        return e

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if is_api_request():
            return jsonify({'success': False, 'message': 'Internal server error'}), 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        from utils.ui_helpers import get_nav_sections

        return {
            'current_year': datetime.now().year,
            'nav_sections': get_nav_sections()
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "img-src 'self' data:; "
            "style-src 'self' 'unsafe-inline'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
