"""
Student lookup by any of its identifiers.

Each endpoint accepts a single key that may be the primary id, the external
``user_id``, the roll number or the email. Strategies are tried in a fixed
order and the first match wins.
"""

from collections import namedtuple
from typing import Optional, Sequence
from clearance.models import db, Student
from clearance.utils.exceptions import NotFoundError

# Largest value a 64-bit signed INTEGER column can hold
MAX_PRIMARY_ID = 2 ** 63 - 1

LookupStrategy = namedtuple('LookupStrategy', ['name', 'find'])


def _by_primary_id(key: str) -> Optional[Student]:
    if not key.isdecimal():
        return None
    student_id = int(key)
    if student_id > MAX_PRIMARY_ID:
        return None
    return db.session.get(Student, student_id)


def _by_user_id(key: str) -> Optional[Student]:
    return Student.query.filter_by(user_id=key).first()


def _by_roll_number(key: str) -> Optional[Student]:
    return Student.query.filter_by(roll_number=key).first()


def _by_email(key: str) -> Optional[Student]:
    return Student.query.filter_by(email=key.strip().lower()).first()


BY_ID = LookupStrategy('id', _by_primary_id)
BY_USER_ID = LookupStrategy('user_id', _by_user_id)
BY_ROLL_NUMBER = LookupStrategy('roll_number', _by_roll_number)
BY_EMAIL = LookupStrategy('email', _by_email)

# Status updates, documents, notifications
DEFAULT_LOOKUP_ORDER = (BY_ID, BY_USER_ID, BY_EMAIL)
# Certificate verification, profile reads, admin messages
EXTENDED_LOOKUP_ORDER = (BY_ID, BY_USER_ID, BY_ROLL_NUMBER, BY_EMAIL)


def find_student(key, strategies: Sequence[LookupStrategy] = DEFAULT_LOOKUP_ORDER) -> Student:
    """
    Resolve a student from a lookup key

    Args:
        key: Primary id, user id, roll number or email
        strategies: Ordered strategies to try

    Returns:
        The first student matched

    Raises:
        NotFoundError: If no strategy matches
    """
    key = str(key).strip() if key is not None else ''
    if key:
        for strategy in strategies:
            student = strategy.find(key)
            if student is not None:
                return student
    raise NotFoundError("Student not found")
