"""
Document metadata service
"""

from datetime import datetime
from typing import Any, Dict, List
from clearance.models import db, Document, DEPARTMENTS, commit_session
from clearance.services.lookup import find_student, DEFAULT_LOOKUP_ORDER
from clearance.services.storage_service import StorageService
from clearance.utils.validators import validate_department, validate_required, parse_timestamp
from clearance.utils.exceptions import ValidationError


class DocumentService:
    """Document service class"""

    @staticmethod
    def build_document(department: str, data: Dict[str, Any]) -> Document:
        """
        Validate uploaded document metadata and build an unsaved document

        Args:
            department: Department key
            data: id, url, publicId, filename, fileType and optional uploadDate

        Returns:
            The document, not yet attached to a student
        """
        validate_department(department, DEPARTMENTS)
        if not isinstance(data, dict):
            raise ValidationError("Document data must be an object")

        validate_required(data.get('url'), 'URL')
        validate_required(data.get('publicId'), 'Public ID')
        validate_required(data.get('filename'), 'Filename')
        validate_required(data.get('fileType'), 'File type')

        document = Document(
            department=department,
            url=data['url'],
            public_id=data['publicId'],
            filename=data['filename'],
            file_type=data['fileType'],
            upload_date=parse_timestamp(data.get('uploadDate'), 'Upload date') or datetime.utcnow()
        )
        if data.get('id'):
            document.document_id = str(data['id'])
        return document

    @staticmethod
    def add_document(lookup_key: str, department: str, data: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Attach uploaded document metadata to a student's department

        Args:
            lookup_key: Student id, user id or email
            department: Department key
            data: id, url, publicId, filename, fileType and optional uploadDate

        Returns:
            The department's documents after the addition

        Raises:
            ValidationError: If the metadata is incomplete or the id is already used
                in this department
        """
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        data = data or {}
        document = DocumentService.build_document(department, data)

        if data.get('id') and Document.query.filter_by(
            student_id=student.id, department=department, document_id=document.document_id
        ).first():
            raise ValidationError("Document with this id already exists")

        student.documents.append(document)
        commit_session("save document")
        return [doc.to_dict() for doc in student.documents_for(department)]

    @staticmethod
    def delete_document(lookup_key: str, department: str, document_id: str) -> bool:
        """
        Remove a document from a student's department

        The stored object is deleted on a best-effort basis; the metadata is
        removed even if that fails.

        Returns:
            True if a document was removed
        """
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        validate_department(department, DEPARTMENTS)

        document = Document.query.filter_by(
            student_id=student.id, department=department, document_id=document_id
        ).first()
        if document is None:
            return False

        StorageService.try_delete_object(document.public_id)
        db.session.delete(document)
        commit_session("delete document")
        return True
