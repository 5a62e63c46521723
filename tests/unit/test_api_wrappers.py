import pytest

from src.api.ui_integration import admin_api, auth_api, course_api, post_api
from src.api.ui_integration.client import RequestError


def test_list_courses_omits_empty_filters(make_client):
    client = make_client({("GET", "/courses"): {"success": True, "data": []}})
    course_api.list_courses(client, search="", category="Design", level=None)
    assert client.calls == [("GET", "/courses", {"category": "Design"}, None)]


def test_admin_list_jobs_status_param(make_client):
    client = make_client({("GET", "/admin/jobs"): {"data": [{"_id": "1"}]}})
    assert admin_api.list_jobs(client) == [{"_id": "1"}]
    admin_api.list_jobs(client, status="pending")
    assert client.calls[0][2] is None
    assert client.calls[1][2] == {"status": "pending"}


def test_reject_sends_reason_body(make_client):
    client = make_client({("PUT", "/admin/jobs/9/reject"): {"success": True}})
    admin_api.reject_job(client, "9", "Incomplete description")
    assert client.calls == [("PUT", "/admin/jobs/9/reject", None, {"reason": "Incomplete description"})]


def test_feed_pagination_params(make_client):
    client = make_client({("GET", "/posts/feed"): {"posts": [{"_id": "p1"}]}})
    assert post_api.list_feed(client, page=3, limit=20) == [{"_id": "p1"}]
    assert client.calls[0][2] == {"page": 3, "limit": 20}


def test_login_reads_token_and_user(make_client):
    client = make_client(
        {
            ("POST", "/auth/login"): {
                "success": True,
                "token": "t0k",
                "user": {"_id": "u1", "email": "a@b.c", "role": "student"},
            }
        }
    )
    token, user = auth_api.login(client, "a@b.c", "pw")
    assert token == "t0k"
    assert user["role"] == "student"
    assert client.calls[0][3] == {"email": "a@b.c", "password": "pw"}


def test_login_accepts_nested_data(make_client):
    client = make_client(
        {("POST", "/auth/login"): {"data": {"token": "t", "user": {"role": "admin"}}}}
    )
    assert auth_api.login(client, "a@b.c", "pw") == ("t", {"role": "admin"})


def test_login_without_user_is_an_error(make_client):
    client = make_client({("POST", "/auth/login"): {"token": "t"}})
    with pytest.raises(RequestError):
        auth_api.login(client, "a@b.c", "pw")
