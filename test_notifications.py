"""
Tests for notification creation and management
"""

import pytest
from clearance.models import DEPARTMENTS
from clearance.services import NotificationService
from clearance.utils.exceptions import ValidationError


def test_emitter_defaults_type_to_message(app, make_student):
    student = make_student()

    notification = NotificationService.create_notification(student, 'Hello', 'Welcome back')

    assert notification.type == 'message'
    assert notification.is_read is False
    assert notification.created_at is not None


@pytest.mark.parametrize('title, message', [('', 'body'), ('Title', ''), (None, 'body'), ('Title', '   ')])
def test_emitter_requires_title_and_message(app, make_student, title, message):
    student = make_student()

    with pytest.raises(ValidationError):
        NotificationService.create_notification(student, title, message)


def test_emitter_requires_student(app):
    with pytest.raises(ValidationError):
        NotificationService.create_notification(None, 'Title', 'Body')


def test_emitter_rejects_unknown_type(app, make_student):
    with pytest.raises(ValidationError):
        NotificationService.create_notification(make_student(), 'Title', 'Body', 'urgent')


def test_create_and_list_notifications(client, make_student):
    student = make_student()

    first = client.post('/api/notifications', json={
        'student_id': student.user_id, 'title': 'First', 'message': 'one'
    })
    second = client.post('/api/notifications', json={
        'student_id': student.email, 'title': 'Second', 'message': 'two', 'type': 'system'
    })

    assert first.status_code == 201
    assert second.get_json()['type'] == 'system'
    titles = [n['title'] for n in client.get(f'/api/notifications/student/{student.id}').get_json()]
    assert titles == ['Second', 'First']


def test_create_notification_missing_fields_returns_400(client, make_student):
    student = make_student()

    response = client.post('/api/notifications', json={'student_id': student.id, 'title': 'No body'})

    assert response.status_code == 400


def test_create_notification_unknown_student_returns_404(client):
    response = client.post('/api/notifications', json={
        'student_id': 'ghost', 'title': 'Hi', 'message': 'there'
    })

    assert response.status_code == 404


def test_unread_count_and_mark_as_read(client, make_student):
    student = make_student()
    for title in ('A', 'B'):
        client.post('/api/notifications', json={'student_id': student.id, 'title': title, 'message': 'x'})
    notification_id = client.get(f'/api/notifications/student/{student.id}').get_json()[0]['id']

    assert client.get(f'/api/notifications/student/{student.id}/unread').get_json() == {'count': 2}

    response = client.put(f'/api/notifications/{notification_id}/read')
    assert response.get_json()['is_read'] is True
    assert client.get(f'/api/notifications/student/{student.id}/unread').get_json() == {'count': 1}


def test_mark_unknown_notification_returns_404(client):
    assert client.put('/api/notifications/12345/read').status_code == 404


def test_delete_notification(client, make_student):
    student = make_student()
    created = client.post('/api/notifications', json={
        'student_id': student.id, 'title': 'Bye', 'message': 'soon'
    }).get_json()

    assert client.delete(f"/api/notifications/{created['id']}").status_code == 200
    assert client.delete(f"/api/notifications/{created['id']}").status_code == 404
    assert client.get(f'/api/notifications/student/{student.id}').get_json() == []


def test_clearance_notification_requires_full_clearance(client, make_student):
    pending = make_student()
    cleared = make_student(**{dept: True for dept in DEPARTMENTS})

    response = client.post('/api/notifications/clearance', json={'student_id': pending.id})
    assert response.status_code == 400

    response = client.post('/api/notifications/clearance', json={'student_id': cleared.id})
    assert response.status_code == 201
    assert response.get_json()['type'] == 'clearance'


def test_admin_send_notification_accepts_roll_number(client, make_student):
    student = make_student(roll_number='20-ME-007')

    response = client.post('/api/admin/notifications', json={
        'student_id': '20-ME-007', 'title': 'Library', 'message': 'Return your books'
    })

    assert response.status_code == 201
    assert response.get_json()['student_id'] == student.id


def test_admin_send_notification_requires_all_fields(client):
    response = client.post('/api/admin/notifications', json={'title': 'Library'})

    assert response.status_code == 400
