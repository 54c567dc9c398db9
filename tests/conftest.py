"""
Shared fixtures: canned HTTP responses, sample records and an in-memory
stand-in for a ResourceApi.
"""

import json

import pytest
import requests

from services.errors import ApiError


def build_response(status: int = 200, body=None, raw: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.headers["Content-Type"] = "application/json"
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode()
    return response


class FakeResource:
    """In-memory ResourceApi that records every call.

    - `fail`: operation names that raise ApiError
    - `hooks`: operation name -> callable run once while that call is
      "in flight", used to interleave other screen events
    """

    def __init__(self, records=None):
        self.records = [dict(r) for r in (records or [])]
        self.calls = []
        self.fail = set()
        self.hooks = {}

    def _call(self, op, *args):
        self.calls.append((op, *args))
        hook = self.hooks.pop(op, None)
        if hook is not None:
            hook()
        if op in self.fail:
            raise ApiError(f"{op} failed", status_code=500)

    def ops(self):
        return [c[0] for c in self.calls]

    def list_all(self):
        self._call("list_all")
        return [dict(r) for r in self.records]

    def get(self, record_id):
        self._call("get", record_id)
        for r in self.records:
            if r.get("_id") == record_id:
                return dict(r)
        return None

    def search(self, query):
        self._call("search", query)
        q = query.lower()
        return [dict(r) for r in self.records if q in str(r.get("name", "")).lower()]

    def create(self, payload):
        self._call("create", payload)
        record = dict(payload, _id=str(len(self.records) + 1))
        self.records.append(record)
        return record

    def update(self, record_id, payload):
        self._call("update", record_id, payload)
        self.records = [dict(payload) if r.get("_id") == record_id else r for r in self.records]
        return dict(payload)

    def delete(self, record_id):
        self._call("delete", record_id)
        self.records = [r for r in self.records if r.get("_id") != record_id]
        return {"message": "deleted"}


class FakeClient:
    def __init__(self, **resources):
        self.resources = resources

    def resource(self, name):
        return self.resources[name]


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def patient_record():
    return {
        "_id": "p1",
        "name": "Jane Doe",
        "age": 42,
        "gender": "Female",
        "contactInfo": {"phone": "555-0101", "email": "jane@example.com"},
        "address": "12 Elm Street",
        "bloodType": "O+",
        "medicalHistory": "",
        "emergencyContact": "555-0199",
        "insuranceDetails": {
            "provider": "Acme Health",
            "policyNumber": "",
            "expiryDate": "2026-03-31T00:00:00.000Z",
        },
    }


@pytest.fixture
def doctor_record():
    return {
        "_id": "123",
        "name": "Dr. A",
        "specialization": "Cardiology",
        "department": "Heart Center",
        "yearsOfExperience": 12,
        "contactInfo": {"phone": "555-0200", "email": "dr.a@example.com"},
        "licenseNumber": "LIC-889",
        "officeHours": "9 AM - 5 PM",
        "emergencyContact": "555-0299",
        "education": "MD, Johns Hopkins",
    }


@pytest.fixture
def patients(patient_record):
    other = dict(patient_record, _id="p2", name="John Smith", gender="Male")
    return FakeResource([patient_record, other])


@pytest.fixture
def doctors(doctor_record):
    return FakeResource([doctor_record])


@pytest.fixture
def fake_client(patients, doctors):
    return FakeClient(patients=patients, doctors=doctors)
