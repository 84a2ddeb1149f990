"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern with one blueprint per site section

This module initializes the Flask application with its extensions,
configuration and template globals. Page handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request
from sqlalchemy.exc import SQLAlchemyError
from config import get_config
from extensions import db

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.blog import blog_bp
from blueprints.work import work_bp
from blueprints.newsletter import newsletter_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    # Registry image paths like /images/avatar.png are served straight from static/
    app = Flask(__name__, static_url_path='')

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    from utils.helpers import format_date
    app.jinja_env.filters['format_date'] = format_date

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    from cli import content_cli
    app.cli.add_command(content_cli)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        import models  # noqa: F401
        try:
            db.create_all()
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(work_bp)
    app.register_blueprint(newsletter_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Content and navigation shared by every template"""
        import content
        from utils.data import get_global_meta
        from utils.ui_helpers import get_navigation, inject_blueprint_assets, get_page_specific_class

        blueprint_assets = inject_blueprint_assets()
        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'person': content.person,
            'social': content.social,
            'newsletter': content.newsletter,
            'navigation': get_navigation(request.endpoint),
            'default_meta': get_global_meta(),
            'current_year': datetime.now().year,
            # Blueprint Assets
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
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
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
