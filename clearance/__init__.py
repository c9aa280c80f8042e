"""
Clearance Tracker Application Factory
"""

import os
from flask import Flask, jsonify
from flask_cors import CORS
from clearance.models import db, init_db
from clearance.routes import student_bp, admin_bp, admins_bp, notification_bp
from clearance.utils import setup_logging, log_info


def create_app(config_name: str = None) -> Flask:
    """
    Application factory
    
    Args:
        config_name: Configuration name (development, production, testing)
        
    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    
    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')
    
    # Import and set configuration
    from config import config
    config_class = config[config_name]
    app.config.from_object(config_class)
    config_class.init_app(app)
    
    # Initialize extensions
    db.init_app(app)
    CORS(app)
    
    # Setup logging
    with app.app_context():
        setup_logging()
        log_info("Application initialized")
    
    # Register blueprints
    app.register_blueprint(student_bp, url_prefix='/api/students')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(admins_bp, url_prefix='/api/admins')
    app.register_blueprint(notification_bp, url_prefix='/api/notifications')
    
    @app.route('/')
    def index():
        return jsonify({'message': 'Welcome to the Clearance Management System API'})
    
    # Create database tables
    init_db(app)
    with app.app_context():
        log_info("Database tables created successfully")
    
    return app
