"""
Main application entry point
"""

import os
import sys
from sqlalchemy import text
from clearance import create_app
from clearance.models import db
from clearance.utils import log_info, log_error


def main():
    """Main application entry point"""
    print("=" * 50)
    print("Starting Clearance Tracker")
    print("=" * 50)
    
    try:
        # Create the application
        app = create_app()
        
        # Test database connection
        with app.app_context():
            try:
                db.session.execute(text('SELECT 1'))
                log_info("Database connection available")
            except Exception as e:
                log_error("Database connection error", e)
                print(f"Database connection error: {e}")
                return False
        
        # Run the application
        debug_mode = os.environ.get('FLASK_DEBUG', 'True').lower() in ['true', '1', 'on']
        port = int(os.environ.get('PORT', 5000))
        print(f"Starting server on http://localhost:{port}")
        print(f"Debug mode: {'ON' if debug_mode else 'OFF'}")
        
        app.run(
            host='0.0.0.0',
            port=port,
            debug=debug_mode
        )
        return True
        
    except Exception as e:
        print(f"Failed to start application: {e}")
        return False

if __name__ == '__main__':
    success = main()
    if not success:
        sys.exit(1)
