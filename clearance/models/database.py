"""
Database initialization and session utilities
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError
from clearance.utils.exceptions import DatabaseError

db = SQLAlchemy()


def init_db(app) -> None:
    """Create all tables for the registered models"""
    with app.app_context():
        db.create_all()


def commit_session(action: str) -> None:
    """
    Commit the current session

    Args:
        action: Short description of the write, used in the error message

    Raises:
        DatabaseError: If the commit fails. The session is rolled back first.
    """
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise DatabaseError(f"Failed to {action}: {str(e)}") from e
