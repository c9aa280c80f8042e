"""
Shared pytest fixtures
"""

import pytest
from clearance import create_app
from clearance.models import db, Student, Notification, DEPARTMENTS


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_student(app):
    """Factory for saved students; extra kwargs become department flags"""
    counter = {'n': 0}

    def _make(name=None, email=None, roll_number=None, user_id=None, password='secret123', **flags):
        counter['n'] += 1
        n = counter['n']
        student = Student(
            name=name or f"Student {n}",
            email=email or f"student{n}@uni.edu",
            roll_number=roll_number or f"21-CS-{n:03d}",
            user_id=user_id or f"user-{n}",
            clearance_status={dept: flags.get(dept, False) for dept in DEPARTMENTS}
        )
        student.set_password(password)
        db.session.add(student)
        db.session.commit()
        return student

    return _make


@pytest.fixture
def notifications_for():
    def _list(student_id):
        return (Notification.query
                .filter_by(student_id=student_id)
                .order_by(Notification.id)
                .all())
    return _list
