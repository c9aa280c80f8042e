"""
Student and document models
"""

import uuid
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from clearance.models.database import db

# Clearance departments, in display order
DEPARTMENTS = (
    'dispensary',
    'hostel',
    'due',
    'library',
    'academic_department',
    'alumni',
)


class Student(db.Model):
    """Student model"""
    __tablename__ = 'students'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), unique=True, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    roll_number = db.Column(db.String(50), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), default='student', nullable=False)

    # One flag per department
    dispensary = db.Column(db.Boolean, default=False, nullable=False)
    hostel = db.Column(db.Boolean, default=False, nullable=False)
    due = db.Column(db.Boolean, default=False, nullable=False)
    library = db.Column(db.Boolean, default=False, nullable=False)
    academic_department = db.Column(db.Boolean, default=False, nullable=False)
    alumni = db.Column(db.Boolean, default=False, nullable=False)

    clearance_date = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    documents = db.relationship('Document', backref='student', lazy=True,
                                cascade='all, delete-orphan',
                                order_by='Document.pk')
    notifications = db.relationship('Notification', backref='student', lazy=True,
                                    cascade='all, delete-orphan')

    def __init__(self, **kwargs):
        clearance_status = kwargs.pop('clearance_status', None)
        super().__init__(**kwargs)
        for department in DEPARTMENTS:
            if getattr(self, department) is None:
                setattr(self, department, False)
        if clearance_status:
            self.clearance_status = clearance_status

    @property
    def clearance_status(self):
        """Department flags as a dict"""
        return {department: bool(getattr(self, department)) for department in DEPARTMENTS}

    @clearance_status.setter
    def clearance_status(self, status):
        for department, value in status.items():
            if department in DEPARTMENTS:
                setattr(self, department, bool(value))

    def set_password(self, password):
        """Set password hash"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check password"""
        return check_password_hash(self.password_hash, password)

    def documents_for(self, department):
        """Documents attached to one department, oldest first"""
        return [doc for doc in self.documents if doc.department == department]

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'email': self.email,
            'roll_number': self.roll_number,
            'role': self.role,
            'clearance_status': self.clearance_status,
            'documents': {
                department: [doc.to_dict() for doc in self.documents_for(department)]
                for department in DEPARTMENTS
            },
            'clearance_date': self.clearance_date.isoformat() if self.clearance_date else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }


class Document(db.Model):
    """Uploaded document metadata, owned by one student and department"""
    __tablename__ = 'documents'

    pk = db.Column(db.Integer, primary_key=True)
    document_id = db.Column(db.String(64), nullable=False, default=lambda: uuid.uuid4().hex)
    student_id = db.Column(db.Integer, db.ForeignKey('students.id'), nullable=False)
    department = db.Column(db.String(50), nullable=False)
    url = db.Column(db.Text, nullable=False)
    public_id = db.Column(db.String(255), nullable=False)
    filename = db.Column(db.String(255), nullable=False)
    file_type = db.Column(db.String(100), nullable=False)
    upload_date = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.document_id,
            'url': self.url,
            'publicId': self.public_id,
            'filename': self.filename,
            'fileType': self.file_type,
            'uploadDate': self.upload_date.isoformat() if self.upload_date else None
        }
