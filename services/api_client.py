"""
REST client for the hospital backend.

One ResourceApi per collection (patients, doctors), each exposing the same
six calls. Every failure is raised as ApiError; nothing is retried or cached.
"""

import logging
import threading
from urllib.parse import quote

import requests

from services.errors import ApiError

logger = logging.getLogger(__name__)


JSON_HEADERS = {"Content-Type": "application/json"}


class ApiClient:
    """Talks to one backend.

    An injected session is used as is. Otherwise every thread gets its own
    requests.Session, as the dashboard lists collections from a thread pool
    and Session objects are not thread-safe.
    """

    def __init__(self, base_url: str, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self._session = session
        self._local = threading.local()
        if session is not None:
            session.headers.update(JSON_HEADERS)
        self.patients = ResourceApi(self, "patients")
        self.doctors = ResourceApi(self, "doctors")

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update(JSON_HEADERS)
            self._local.session = session
        return session

    def resource(self, name: str) -> "ResourceApi":
        if name == "patients":
            return self.patients
        if name == "doctors":
            return self.doctors
        raise KeyError(f"Unknown resource: {name}")

    def url_for(self, *segments) -> str:
        parts = [quote(str(s), safe="") for s in segments]
        return "/".join([self.base_url, *parts])

    def request(self, method: str, *segments, payload=None):
        """Send one request and return the decoded JSON body (None when empty)."""
        url = self.url_for(*segments)
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(method, url, json=payload)
            response.raise_for_status()
        except requests.RequestException as e:
            status = getattr(getattr(e, "response", None), "status_code", None)
            raise ApiError(f"{method} {url} failed: {e}", status_code=status, url=url) from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"{method} {url} returned a malformed body",
                status_code=response.status_code,
                url=url,
            ) from e


class ResourceApi:
    """The six calls of one REST collection."""

    def __init__(self, client: ApiClient, resource: str):
        self.client = client
        self.resource = resource

    def list_all(self):
        return self.client.request("GET", self.resource)

    def get(self, record_id: str):
        return self.client.request("GET", self.resource, record_id)

    def search(self, query: str):
        return self.client.request("GET", self.resource, "search", query)

    def create(self, payload: dict):
        return self.client.request("POST", self.resource, payload=payload)

    def update(self, record_id: str, payload: dict):
        return self.client.request("PUT", self.resource, record_id, payload=payload)

    def delete(self, record_id: str):
        return self.client.request("DELETE", self.resource, record_id)
