import copy
import json

import pytest

from src.ui.session import TOKEN_KEY, USER_KEY


class FakeClient:
    """
    Stands in for ApiClient: records every call and answers from a route
    table keyed by (method, path). A route value may be a payload, an
    exception instance (raised) or a callable(params, json) -> payload.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.store = {}

    def request(self, method, path, params=None, json=None):
        self.calls.append((method, path, params, json))
        if (method, path) not in self.routes:
            raise AssertionError(f"unexpected call {method} {path}")
        resp = self.routes[(method, path)]
        if callable(resp):
            resp = resp(params, json)
        if isinstance(resp, Exception):
            raise resp
        return copy.deepcopy(resp)

    def get(self, path, params=None):
        return self.request("GET", path, params=params)

    def post(self, path, json=None):
        return self.request("POST", path, json=json)

    def put(self, path, json=None):
        return self.request("PUT", path, json=json)

    def delete(self, path):
        return self.request("DELETE", path)

    def detached(self):
        return self

    def count(self, method, path):
        return sum(1 for c in self.calls if c[0] == method and c[1] == path)

    def mutations(self):
        return [c for c in self.calls if c[0] in ("POST", "PUT", "DELETE")]


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def store():
    return {}


def _session(role, **extra):
    user = {"_id": f"{role}-1", "email": f"{role}@example.com", "role": role}
    user.update(extra)
    return {TOKEN_KEY: f"tok-{role}", USER_KEY: json.dumps(user)}


@pytest.fixture
def admin_store():
    return _session("admin")


@pytest.fixture
def student_store():
    return _session("student", firstName="Ada", lastName="Lovelace")


@pytest.fixture
def employer_store():
    return _session("employer", companyName="Acme")


@pytest.fixture
def make_job():
    def _make(jid, status="active", **extra):
        job = {
            "_id": jid,
            "title": f"Job {jid}",
            "description": "Build things",
            "status": status,
            "jobType": "full-time",
            "experienceLevel": "entry",
            "location": {"city": "Dhaka", "state": "Dhaka"},
            "employer": {"email": "hr@acme.test"},
        }
        job.update(extra)
        return job

    return _make


@pytest.fixture
def make_client():
    return FakeClient
