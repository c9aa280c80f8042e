"""
Tests for the admin clearance status update flow
"""

import json
import pytest
from clearance import create_app
from clearance.models import db, Student, DEPARTMENTS
from clearance.services import ClearanceService
from clearance.utils.exceptions import DatabaseError, NotFoundError, ValidationError
from config import TestingConfig

ALL_CLEARED = {dept: True for dept in DEPARTMENTS}


def put_status(client, key, status, message=None):
    body = {'clearance_status': status}
    if message is not None:
        body['notification_message'] = message
    # json= sorts keys; message lines follow body order
    return client.put(f'/api/admin/students/{key}/status',
                      data=json.dumps(body), content_type='application/json')


def test_partial_update_merges_and_returns_student(client, make_student):
    student = make_student(library=True)

    response = put_status(client, student.id, {'hostel': True})

    assert response.status_code == 200
    data = response.get_json()
    assert data['clearance_status'] == {
        'dispensary': False, 'hostel': True, 'due': False,
        'library': True, 'academic_department': False, 'alumni': False
    }
    assert data['clearance_date'] is None
    assert 'password_hash' not in data


def test_status_change_creates_one_line_per_department(client, make_student, notifications_for):
    student = make_student()

    put_status(client, student.id, {'library': True, 'academic_department': True})

    notifications = notifications_for(student.id)
    assert len(notifications) == 1
    assert notifications[0].title == 'Clearance Status Updated'
    assert notifications[0].type == 'message'
    assert notifications[0].is_read is False
    assert notifications[0].message.split('\n') == [
        'Your clearance status has been updated:',
        'Library: Cleared',
        'Academic department: Cleared',
    ]


def test_override_message_replaces_generated_text(client, make_student, notifications_for):
    student = make_student()

    put_status(client, student.id, {'due': True}, message='Fees received, thank you.')

    notifications = notifications_for(student.id)
    assert [n.message for n in notifications] == ['Fees received, thank you.']


def test_repeating_same_update_creates_no_duplicate_notification(client, make_student, notifications_for):
    student = make_student()

    put_status(client, student.id, {'library': True})
    put_status(client, student.id, {'library': True})

    assert len(notifications_for(student.id)) == 1


def test_clearing_everything_at_once_creates_two_notifications(client, make_student, notifications_for):
    student = make_student()

    response = put_status(client, student.id, ALL_CLEARED)

    assert response.status_code == 200
    notifications = notifications_for(student.id)
    assert [n.type for n in notifications] == ['message', 'clearance']
    assert notifications[1].title == 'Clearance Completed'
    assert notifications[1].message.startswith('Congratulations!')


def test_clearing_last_department_skips_completion_notification(client, make_student, notifications_for):
    student = make_student(**dict(ALL_CLEARED, alumni=False))

    put_status(client, student.id, {'alumni': True})

    notifications = notifications_for(student.id)
    assert len(notifications) == 1
    assert notifications[0].type == 'message'
    assert db.session.get(Student, student.id).clearance_date is not None


def test_on_transition_rule_notifies_when_last_department_clears(app, client, make_student, notifications_for):
    app.config['CLEARANCE_COMPLETION_RULE'] = 'on_transition'
    student = make_student(**dict(ALL_CLEARED, alumni=False))

    put_status(client, student.id, {'alumni': True})

    assert [n.type for n in notifications_for(student.id)] == ['message', 'clearance']


def test_clearance_date_set_and_cleared_on_transitions(client, make_student):
    student = make_student(**dict(ALL_CLEARED, hostel=False))

    data = put_status(client, student.id, {'hostel': True}).get_json()
    assert data['clearance_date'] is not None
    first_date = data['clearance_date']

    # Already set: stays put
    data = put_status(client, student.id, {'library': True}).get_json()
    assert data['clearance_date'] == first_date

    data = put_status(client, student.id, {'library': False}).get_json()
    assert data['clearance_date'] is None


def test_lookup_by_alternate_id_and_email(client, make_student):
    make_student()
    student = make_student(user_id='ext-77', email='ayesha@uni.edu')

    response = put_status(client, 'ext-77', {'dispensary': True})
    assert response.status_code == 200
    assert response.get_json()['id'] == student.id

    response = put_status(client, 'ayesha@uni.edu', {'hostel': True})
    assert response.status_code == 200
    assert response.get_json()['clearance_status']['hostel'] is True


def test_primary_id_wins_over_alternate_id(client, make_student):
    first = make_student()
    make_student(user_id=str(first.id))

    response = put_status(client, first.id, {'due': True})

    assert response.get_json()['id'] == first.id


def test_unknown_student_returns_404(client):
    response = put_status(client, 'nobody@uni.edu', {'library': True})

    assert response.status_code == 404
    assert response.get_json()['ok'] is False


@pytest.mark.parametrize('body', [
    {},
    {'clearance_status': {'gym': True}},
    {'clearance_status': {'library': 'yes'}},
    {'clearance_status': ['library']},
])
def test_invalid_update_is_rejected_without_changes(client, make_student, notifications_for, body):
    student = make_student()

    response = client.put(f'/api/admin/students/{student.id}/status', json=body)

    assert response.status_code == 400
    assert notifications_for(student.id) == []
    assert not any(db.session.get(Student, student.id).clearance_status.values())


def test_failed_status_write_leaves_record_unchanged(client, make_student, monkeypatch):
    student = make_student()

    def failing_commit(action):
        raise DatabaseError(f"Failed to {action}")

    monkeypatch.setattr('clearance.services.clearance_service.commit_session', failing_commit)
    response = put_status(client, student.id, ALL_CLEARED)

    assert response.status_code == 500
    refreshed = db.session.get(Student, student.id)
    assert not any(refreshed.clearance_status.values())
    assert refreshed.clearance_date is None


def test_failed_notification_write_keeps_status_change(client, make_student, notifications_for, monkeypatch):
    student = make_student()

    def failing_commit(action):
        raise DatabaseError(f"Failed to {action}")

    monkeypatch.setattr('clearance.services.notification_service.commit_session', failing_commit)
    response = put_status(client, student.id, {'library': True})

    assert response.status_code == 500
    assert db.session.get(Student, student.id).library is True
    assert notifications_for(student.id) == []


def test_service_raises_domain_errors(app, make_student):
    make_student()

    with pytest.raises(NotFoundError):
        ClearanceService.update_status('missing', {'library': True})
    with pytest.raises(ValidationError):
        ClearanceService.update_status('1', None)


def test_message_lines_follow_request_order(client, make_student, notifications_for):
    student = make_student()

    put_status(client, student.id, {'alumni': True, 'dispensary': True, 'hostel': True})

    lines = notifications_for(student.id)[0].message.split('\n')
    assert lines[1:] == ['Alumni: Cleared', 'Dispensary: Cleared', 'Hostel: Cleared']


def test_unknown_completion_rule_is_rejected_at_startup(monkeypatch):
    monkeypatch.setattr(TestingConfig, 'CLEARANCE_COMPLETION_RULE', 'sometimes')

    with pytest.raises(ValueError):
        create_app('testing')


def test_misconfigured_rule_is_a_server_error(app, client, make_student):
    student = make_student()
    app.config['CLEARANCE_COMPLETION_RULE'] = 'sometimes'

    response = put_status(client, student.id, {'library': True})

    assert response.status_code == 500
    assert db.session.get(Student, student.id).library is False
