"""
Tests for department document metadata
"""

from clearance.models import db, Document
from clearance.services import StorageService
from clearance.utils.exceptions import StorageError


def document_body(**overrides):
    body = {
        'url': 'https://files.example.com/receipt.pdf',
        'publicId': 'clearance/receipt-1',
        'filename': 'receipt.pdf',
        'fileType': 'application/pdf',
    }
    body.update(overrides)
    return body


def test_add_document_returns_department_documents(client, make_student):
    student = make_student()

    client.put(f'/api/students/{student.id}/documents/library', json=document_body())
    response = client.put(
        f'/api/students/{student.user_id}/documents/library',
        json=document_body(id='doc-2', filename='card.png', uploadDate='2024-03-01T10:00:00Z')
    )

    assert response.status_code == 200
    documents = response.get_json()
    assert [d['filename'] for d in documents] == ['receipt.pdf', 'card.png']
    assert documents[1]['id'] == 'doc-2'
    assert documents[1]['uploadDate'].startswith('2024-03-01T10:00:00')

    listed = client.get(f'/api/students/{student.id}').get_json()['documents']
    assert len(listed['library']) == 2
    assert listed['hostel'] == []


def test_add_document_validation(client, make_student):
    student = make_student()

    assert client.put(f'/api/students/{student.id}/documents/gym', json=document_body()).status_code == 400
    assert client.put(f'/api/students/{student.id}/documents/library',
                      json=document_body(url='')).status_code == 400
    assert client.put(f'/api/students/{student.id}/documents/library',
                      json=document_body(uploadDate='yesterday')).status_code == 400
    assert client.put('/api/students/ghost/documents/library', json=document_body()).status_code == 404
    assert Document.query.count() == 0


def test_delete_document_removes_metadata_when_storage_fails(client, make_student, monkeypatch):
    student = make_student()
    client.put(f'/api/students/{student.id}/documents/due', json=document_body(id='fee-slip'))

    def failing_delete(public_id):
        raise StorageError("bucket unavailable")

    monkeypatch.setattr(StorageService, 'delete_object', staticmethod(failing_delete))
    response = client.delete(f'/api/students/{student.id}/documents/due/fee-slip')

    assert response.status_code == 200
    assert Document.query.count() == 0


def test_delete_document_calls_storage(client, make_student, monkeypatch):
    student = make_student()
    client.put(f'/api/students/{student.id}/documents/hostel', json=document_body(id='room-form'))
    deleted = []
    monkeypatch.setattr(StorageService, 'delete_object', staticmethod(deleted.append))

    client.delete(f'/api/students/{student.id}/documents/hostel/room-form')

    assert deleted == ['clearance/receipt-1']


def test_unconfigured_storage_does_not_block_delete(client, make_student):
    student = make_student()
    client.put(f'/api/students/{student.id}/documents/alumni', json=document_body(id='form'))

    response = client.delete(f'/api/students/{student.id}/documents/alumni/form')

    assert response.status_code == 200
    assert Document.query.count() == 0


def test_documents_removed_with_student(client, make_student):
    student = make_student()
    client.put(f'/api/students/{student.id}/documents/library', json=document_body())

    client.delete(f'/api/admin/students/{student.id}')

    assert db.session.query(Document).count() == 0


def test_add_document_rejects_repeated_id(client, make_student):
    student = make_student()
    url = f'/api/students/{student.id}/documents/library'

    assert client.put(url, json=document_body(id='card')).status_code == 200
    response = client.put(url, json=document_body(id='card', filename='other.pdf'))

    assert response.status_code == 400
    assert Document.query.count() == 1

    # Same id in another department is allowed
    assert client.put(f'/api/students/{student.id}/documents/hostel',
                      json=document_body(id='card')).status_code == 200
