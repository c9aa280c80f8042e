"""
HTTP client for the Clearance Tracker API
"""

import logging
from typing import Any, Dict, Optional
import requests
from clearance.utils.cache import TTLCache
from clearance.utils.exceptions import ApiError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ClearanceApiClient:
    """
    Client for the clearance API with cached reads.

    GET responses are cached per endpoint; any write invalidates the cached
    entries of the resource it touched (the first path segment, e.g. ``/students``).

    Args:
        base_url: API root, e.g. ``http://localhost:5000/api``
        cache: Cache for GET responses; a 60 second TTLCache by default
        session: requests session to send through
    """

    def __init__(self, base_url: str, cache: Optional[TTLCache] = None,
                 session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.cache = cache if cache is not None else TTLCache(ttl=60)
        self.session = session or requests.Session()
        self.timeout = timeout

    @staticmethod
    def _cache_key(endpoint: str) -> str:
        return f"GET:{endpoint}"

    @staticmethod
    def resource_prefix(endpoint: str) -> str:
        """Base resource of an endpoint: /students/12/status -> /students"""
        parts = endpoint.split('/')
        return f"/{parts[1]}" if len(parts) > 1 else endpoint

    def _request(self, method: str, endpoint: str, body: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Error calling %s %s: %s", method, endpoint, e)
            raise ApiError(f"Request failed: {str(e)}") from e

        content_type = response.headers.get('content-type', '')
        if 'application/json' in content_type:
            data = response.json()
        else:
            data = {'message': response.text}

        if not response.ok:
            message = data.get('message') if isinstance(data, dict) else None
            logger.error("%s %s returned %s", method, endpoint, response.status_code)
            raise ApiError(message or 'Something went wrong', response.status_code)

        return data

    def get(self, endpoint: str, use_cache: bool = True) -> Any:
        if use_cache:
            cached = self.cache.get(self._cache_key(endpoint))
            if cached is not None:
                return cached

        data = self._request('GET', endpoint)
        if use_cache:
            self.cache.set(self._cache_key(endpoint), data)
        return data

    def post(self, endpoint: str, body: Optional[Dict[str, Any]] = None, invalidate_cache: bool = True) -> Any:
        data = self._request('POST', endpoint, body)
        if invalidate_cache:
            self.invalidate_related_cache(endpoint)
        return data

    def put(self, endpoint: str, body: Optional[Dict[str, Any]] = None, invalidate_cache: bool = True) -> Any:
        data = self._request('PUT', endpoint, body)
        if invalidate_cache:
            self.invalidate_related_cache(endpoint)
        return data

    def delete(self, endpoint: str, invalidate_cache: bool = True) -> Any:
        data = self._request('DELETE', endpoint)
        if invalidate_cache:
            self.invalidate_related_cache(endpoint)
        return data

    def invalidate_related_cache(self, endpoint: str) -> int:
        """Drop cached GETs for the resource an endpoint belongs to"""
        return self.cache.invalidate_prefix(self._cache_key(self.resource_prefix(endpoint)))

    def clear_cache(self) -> None:
        self.cache.clear()

    # Convenience wrappers

    def get_student(self, student_id: str) -> Dict[str, Any]:
        return self.get(f"/students/{student_id}")

    def update_clearance_status(self, student_id: str, clearance_status: Dict[str, bool],
                                notification_message: Optional[str] = None) -> Dict[str, Any]:
        body = {'clearance_status': clearance_status}
        if notification_message:
            body['notification_message'] = notification_message
        data = self.put(f"/admin/students/{student_id}/status", body)
        # The update also changes the student record and their notifications
        self.invalidate_related_cache('/students')
        self.invalidate_related_cache('/notifications')
        return data

    def verify_certificate(self, student_id: str) -> Dict[str, Any]:
        return self.get(f"/students/verify/{student_id}", use_cache=False)

    def get_notifications(self, student_id: str) -> Any:
        return self.get(f"/notifications/student/{student_id}")

    def mark_notification_read(self, notification_id: int) -> Dict[str, Any]:
        return self.put(f"/notifications/{notification_id}/read")
