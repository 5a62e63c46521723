import pytest

from src.api.ui_integration.client import RequestError
from src.ui.pages.admin_employers import AdminEmployersPage


def _employer(uid, verified):
    return {
        "_id": uid,
        "email": f"{uid}@corp.test",
        "employerProfile": {"companyName": f"Corp {uid}", "isVerified": verified},
    }


@pytest.fixture
def employers_client(make_client):
    return make_client(
        {
            ("GET", "/admin/users"): {
                "data": {"users": [_employer("a", True), _employer("b", False), _employer("c", False)]}
            }
        }
    )


def test_lists_employers_with_role_param(admin_store, employers_client):
    page = AdminEmployersPage(admin_store, employers_client)
    assert page.mount()
    page.load()
    assert employers_client.calls == [("GET", "/admin/users", {"role": "employer"}, None)]
    assert page.counts() == {"all": 3, "verified": 1, "unverified": 2}


def test_tabs_filter_client_side(admin_store, employers_client):
    page = AdminEmployersPage(admin_store, employers_client)
    page.mount()
    page.load()
    page.select_filter("unverified")
    page.load()
    assert [e["_id"] for e in page.employers] == ["b", "c"]
    page.select_filter("verified")
    assert [e["_id"] for e in page.employers] == ["a"]
    assert employers_client.count("GET", "/admin/users") == 1


def test_action_matches_verification_state(admin_store, employers_client):
    page = AdminEmployersPage(admin_store, employers_client)
    assert page.action_for(_employer("a", True)) is page.unverify
    assert page.action_for(_employer("b", False)) is page.verify


def test_verify_requires_confirmation_and_refetches(admin_store, employers_client):
    employers_client.routes[("PUT", "/admin/employers/b/verify")] = {"success": True}
    page = AdminEmployersPage(admin_store, employers_client)
    page.mount()
    page.load()
    assert page.actions.dispatch("b", page.verify).skipped
    assert employers_client.mutations() == []
    assert page.actions.dispatch("b", page.verify, confirmed=True).ok
    assert employers_client.count("GET", "/admin/users") == 2


def test_unverify_failure(admin_store, employers_client):
    employers_client.routes[("PUT", "/admin/employers/a/unverify")] = RequestError("Employer not found", 404)
    page = AdminEmployersPage(admin_store, employers_client)
    page.mount()
    page.load()
    result = page.actions.dispatch("a", page.unverify, confirmed=True)
    assert not result.ok
    assert page.actions.state.last_error == "Failed to remove verification: Employer not found"
    assert page.counts()["all"] == 3


def test_empty_messages(admin_store, make_client):
    page = AdminEmployersPage(admin_store, make_client({("GET", "/admin/users"): {"data": []}}))
    page.mount()
    page.load()
    assert page.empty_message() == "No companies registered yet"
    page.select_filter("verified")
    assert page.empty_message() == "No verified companies"
