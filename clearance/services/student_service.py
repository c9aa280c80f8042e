"""
Student registry service
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from flask import current_app
from sqlalchemy import or_
from clearance.models import db, Student, DEPARTMENTS, commit_session
from clearance.services.evaluator import is_fully_cleared
from clearance.services.document_service import DocumentService
from clearance.services.lookup import find_student, DEFAULT_LOOKUP_ORDER, EXTENDED_LOOKUP_ORDER
from clearance.utils.validators import (
    validate_email, validate_required, validate_status_update, parse_timestamp
)
from clearance.utils.exceptions import ValidationError, DatabaseError
from clearance.utils.helpers import generate_user_id, log_info, log_warning


class StudentService:
    """Student service class"""

    @staticmethod
    def _find_existing(email: str, roll_number: str, user_id: Optional[str] = None) -> Optional[Student]:
        conditions = [Student.email == email, Student.roll_number == roll_number]
        if user_id:
            conditions.append(Student.user_id == str(user_id))
        return Student.query.filter(or_(*conditions)).first()

    @staticmethod
    def _build_student(name: str, email: str, password: str, roll_number: str,
                       user_id: Optional[str] = None,
                       clearance_status: Optional[Dict[str, bool]] = None,
                       role: str = 'student') -> Student:
        """Validate fields and build an unsaved student"""
        validate_required(name, 'Name')
        validate_required(email, 'Email')
        validate_required(roll_number, 'Roll number')
        validate_required(password, 'Password')

        email = email.strip().lower()
        roll_number = str(roll_number).strip()
        if not validate_email(email):
            raise ValidationError("Invalid email format")
        if StudentService._find_existing(email, roll_number, user_id):
            raise ValidationError("Student with this email, roll number or user ID already exists")
        if clearance_status is not None:
            validate_status_update(clearance_status, DEPARTMENTS)

        student = Student(
            name=name.strip(),
            email=email,
            roll_number=roll_number,
            user_id=str(user_id) if user_id else generate_user_id(),
            role=role,
            clearance_status=clearance_status
        )
        student.set_password(password)
        return student

    @staticmethod
    def create_student(data: Dict[str, Any]) -> Student:
        """
        Register a student with their own password

        Args:
            data: name, email, password, roll_number and optional user_id

        Returns:
            The saved student
        """
        student = StudentService._build_student(
            data.get('name'), data.get('email'), data.get('password'),
            data.get('roll_number'), user_id=data.get('user_id')
        )
        db.session.add(student)
        commit_session("create student")
        log_info(f"Student {student.roll_number} created")
        return student

    @staticmethod
    def add_student(data: Dict[str, Any]) -> Student:
        """
        Add a student from the admin panel with the default password

        Args:
            data: name, email, roll_number and optional clearance_status

        Returns:
            The saved student
        """
        student = StudentService._build_student(
            data.get('name'), data.get('email'),
            current_app.config['DEFAULT_STUDENT_PASSWORD'],
            data.get('roll_number'),
            clearance_status=data.get('clearance_status')
        )
        db.session.add(student)
        commit_session("add student")
        log_info(f"Student {student.roll_number} added by admin")
        return student

    @staticmethod
    def add_bulk_students(records: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Add several students, skipping incomplete or duplicate records

        Args:
            records: Student dictionaries with name, email and roll_number;
                password, user_id and clearance_status are optional

        Returns:
            Dictionary with added and skipped counts and the added students
        """
        results = {'added': 0, 'skipped': 0, 'students': []}
        default_password = current_app.config['DEFAULT_STUDENT_PASSWORD']

        for record in records:
            if not isinstance(record, dict):
                results['skipped'] += 1
                continue

            try:
                student = StudentService._build_student(
                    record.get('name'), record.get('email'),
                    record.get('password') or default_password,
                    record.get('roll_number'),
                    user_id=record.get('user_id'),
                    clearance_status=record.get('clearance_status')
                )
            except ValidationError:
                results['skipped'] += 1
                continue

            db.session.add(student)
            commit_session("add student")
            results['added'] += 1
            results['students'].append(student.to_dict())

        log_info(f"Bulk add finished: {results['added']} added, {results['skipped']} skipped")
        return results

    @staticmethod
    def import_student(record: Dict[str, Any]) -> Student:
        """
        Save one exported student with their role, documents and clearance date

        A fully cleared student without a clearance_date gets the import time.

        Args:
            record: Exported student; name, email and roll_number are required

        Returns:
            The saved student
        """
        student = StudentService._build_student(
            record.get('name'), record.get('email'),
            record.get('password') or current_app.config['DEFAULT_STUDENT_PASSWORD'],
            record.get('roll_number'),
            user_id=record.get('user_id') or record.get('_id'),
            clearance_status=record.get('clearance_status'),
            role=record.get('role') or 'student'
        )

        documents = record.get('documents') or {}
        if not isinstance(documents, dict):
            raise ValidationError("Documents must be an object keyed by department")
        for department, entries in documents.items():
            for entry in entries or []:
                student.documents.append(DocumentService.build_document(department, entry))

        student.clearance_date = parse_timestamp(record.get('clearance_date'), 'Clearance date')
        if student.clearance_date is None and is_fully_cleared(student.clearance_status):
            student.clearance_date = datetime.utcnow()

        db.session.add(student)
        commit_session("import student")
        return student

    @staticmethod
    def import_students(records: Iterable[Any]) -> Dict[str, int]:
        """
        Import exported students one by one

        Students whose email, roll number or user id already exists are skipped.
        A record that is invalid or fails to save is counted as an error and the
        import carries on.

        Returns:
            Dictionary with added, skipped and errors counts
        """
        stats = {'added': 0, 'skipped': 0, 'errors': 0}

        for record in records:
            if not isinstance(record, dict):
                log_warning(f"Skipping malformed student record: {record!r}")
                stats['errors'] += 1
                continue

            email = str(record.get('email') or '').strip().lower()
            roll_number = str(record.get('roll_number') or '').strip()
            if StudentService._find_existing(email, roll_number, record.get('user_id') or record.get('_id')):
                log_info(f"Student with email {email} already exists. Skipping...")
                stats['skipped'] += 1
                continue

            try:
                student = StudentService.import_student(record)
            except (ValidationError, DatabaseError) as e:
                db.session.rollback()
                log_warning(f"Error migrating student {email}: {e}")
                stats['errors'] += 1
                continue

            log_info(f"Migrated student: {student.name} ({student.email})")
            stats['added'] += 1

        return stats

    @staticmethod
    def list_students(search: Optional[str] = None, status: Optional[str] = None) -> List[Student]:
        """
        List students

        Args:
            search: Case-insensitive substring of name, roll number or email
            status: 'cleared' or 'pending'

        Returns:
            Matching students
        """
        query = Student.query
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(or_(
                Student.name.ilike(pattern),
                Student.roll_number.ilike(pattern),
                Student.email.ilike(pattern)
            ))

        students = query.order_by(Student.id).all()
        if status == 'cleared':
            students = [s for s in students if is_fully_cleared(s.clearance_status)]
        elif status == 'pending':
            students = [s for s in students if not is_fully_cleared(s.clearance_status)]
        return students

    @staticmethod
    def get_student(lookup_key: str) -> Student:
        return find_student(lookup_key, EXTENDED_LOOKUP_ORDER)

    @staticmethod
    def delete_student(lookup_key: str) -> None:
        """Delete a student together with their documents and notifications"""
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        db.session.delete(student)
        commit_session("delete student")
        log_info(f"Student {lookup_key} deleted")

    @staticmethod
    def update_password(lookup_key: str, new_password: str) -> None:
        """
        Replace a student's password

        Raises:
            ValidationError: If the new password is missing
            NotFoundError: If no student matches the key
        """
        validate_required(new_password, 'New password')
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        student.set_password(new_password)
        commit_session("update student password")
