"""
Tests for the API client and its response cache
"""

import pytest
import requests
from clearance.services import ClearanceApiClient
from clearance.utils import ApiError, TTLCache


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=''):
        self.status_code = status_code
        self.ok = status_code < 400
        self._payload = payload
        self.text = text
        self.headers = {'content-type': 'application/json'} if payload is not None else {'content-type': 'text/html'}

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self):
        self.calls = []
        self.responses = {}
        self.error = None

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json))
        if self.error:
            raise self.error
        return self.responses.get((method, url), FakeResponse(payload={'method': method, 'url': url}))


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session, clock):
    return ClearanceApiClient('http://api.test/api/', cache=TTLCache(ttl=60, clock=clock), session=session)


def test_get_is_cached_until_ttl_expires(api, session, clock):
    api.get_student('7')
    api.get_student('7')
    assert len(session.calls) == 1

    clock.now = 59.9
    api.get_student('7')
    assert len(session.calls) == 1

    clock.now = 60
    api.get_student('7')
    assert len(session.calls) == 2
    assert session.calls[0][1] == 'http://api.test/api/students/7'


def test_write_invalidates_only_its_resource(api, session):
    api.get('/students/7')
    api.get('/notifications/student/7')

    api.put('/students/7/password', {'newPassword': 'x'})
    api.get('/students/7')
    api.get('/notifications/student/7')

    gets = [call for call in session.calls if call[0] == 'GET']
    assert [call[1] for call in gets] == [
        'http://api.test/api/students/7',
        'http://api.test/api/notifications/student/7',
        'http://api.test/api/students/7',
    ]


def test_status_update_invalidates_students_and_notifications(api, session):
    api.get_student('7')
    api.get_notifications('7')

    api.update_clearance_status('7', {'library': True}, 'Books returned')

    assert session.calls[-1] == (
        'PUT', 'http://api.test/api/admin/students/7/status',
        {'clearance_status': {'library': True}, 'notification_message': 'Books returned'}
    )
    assert len(api.cache) == 0


def test_verify_certificate_is_never_cached(api, session):
    api.verify_certificate('21-CS-001')
    api.verify_certificate('21-CS-001')

    assert len(session.calls) == 2
    assert len(api.cache) == 0


def test_error_response_raises_api_error_with_server_message(api, session):
    session.responses[('GET', 'http://api.test/api/students/99')] = FakeResponse(
        404, {'ok': False, 'message': 'Student not found'}
    )

    with pytest.raises(ApiError) as excinfo:
        api.get_student('99')

    assert str(excinfo.value) == 'Student not found'
    assert excinfo.value.status_code == 404
    assert len(api.cache) == 0


def test_non_json_error_uses_body_text(api, session):
    session.responses[('DELETE', 'http://api.test/api/notifications/3')] = FakeResponse(502, text='Bad gateway')

    with pytest.raises(ApiError) as excinfo:
        api.delete('/notifications/3')

    assert str(excinfo.value) == 'Bad gateway'


def test_network_failure_raises_api_error(api, session):
    session.error = requests.ConnectionError('connection refused')

    with pytest.raises(ApiError):
        api.get('/students')


def test_clear_cache(api, session):
    api.get('/students')
    api.clear_cache()
    api.get('/students')

    assert len(session.calls) == 2


def test_cache_prefix_invalidation_counts_entries(clock):
    cache = TTLCache(ttl=10, clock=clock)
    cache.set('GET:/students', [1])
    cache.set('GET:/students/1', {'id': 1})
    cache.set('GET:/notifications/student/1', [])

    assert cache.invalidate_prefix('GET:/students') == 2
    assert cache.get('GET:/notifications/student/1') == []
