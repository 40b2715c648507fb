"""
Portfolio CMS - Main Application Entry Point
Built using the Application Factory Pattern

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from config import get_config
from extensions import db
from utils.data import StorageError
from utils.messages import get_locale, get_message
from utils.security import is_authenticated

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.pages import pages_bp
from blueprints.dashboard import dashboard_bp


def create_app(config_name=None, overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        overrides (dict): Settings applied on top of the configuration (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # JSON responses keep non-ASCII characters unescaped
    app.json.ensure_ascii = False

    # Fix PostgreSQL URL if needed
    db_url = app.config.get('SQLALCHEMY_DATABASE_URI')
    if db_url and db_url.startswith("postgres://"):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_url.replace(
            "postgres://", "postgresql://", 1)

    if not app.config.get('ADMIN_PASSWORD'):
        app.logger.warning('ADMIN_PASSWORD is empty, dashboard login is disabled')

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio CMS is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(dashboard_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html', message=get_message('not_found')), 404

    @app.errorhandler(StorageError)
    def storage_unavailable(e):
        app.logger.error(f"Storage Error: {str(e)}")
        return render_template('500.html', message=get_message('server_error')), 500

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html', message=get_message('server_error')), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        locale = get_locale()
        return {
            'is_logged_in': is_authenticated(),
            'locale': locale,
            'text_direction': 'rtl' if locale == 'ar' else 'ltr',
            'current_year': datetime.now().year
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        response.headers['Referrer-Policy'] = 'same-origin'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=app.config['PORT'],
        debug=(env == 'development')
    )
