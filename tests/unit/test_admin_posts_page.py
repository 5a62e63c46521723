import pytest

from src.api.ui_integration.client import RequestError
from src.ui.pages.admin_posts import AdminPostsPage


def _post(pid, **extra):
    post = {"_id": pid, "content": f"post {pid}", "author": {"email": "x@y.z"}}
    post.update(extra)
    return post


@pytest.fixture
def posts_client(make_client):
    return make_client(
        {
            ("GET", "/posts/feed"): lambda params, _j: {"posts": [_post(f"p{params['page']}")]},
            ("GET", "/admin/posts/reported"): {"data": [_post("r1", isReported=True)]},
        }
    )


def test_feed_uses_configured_page_size(admin_store, posts_client):
    page = AdminPostsPage(admin_store, posts_client, page_size=5)
    assert page.mount()
    page.load()
    assert posts_client.calls == [("GET", "/posts/feed", {"page": 1, "limit": 5}, None)]
    assert [p["_id"] for p in page.posts] == ["p1"]
    assert page.show_pagination


def test_switching_tab_resets_page(admin_store, posts_client):
    page = AdminPostsPage(admin_store, posts_client, page_size=5)
    page.mount()
    page.filters.next_page()
    page.filters.next_page()
    page.load()
    assert posts_client.calls[-1][2]["page"] == 3

    page.select_tab("reported")
    assert page.filters.state.page == 1
    page.load()
    assert posts_client.calls[-1][1] == "/admin/posts/reported"
    assert not page.show_pagination
    assert page.reported_count == 1

    page.select_tab("all")
    page.load()
    assert posts_client.calls[-1][2] == {"page": 1, "limit": 5}


def test_empty_messages(admin_store, make_client):
    client = make_client({("GET", "/posts/feed"): {"posts": []}, ("GET", "/admin/posts/reported"): {"data": []}})
    page = AdminPostsPage(admin_store, client)
    page.mount()
    page.load()
    assert page.active_view.is_empty
    assert page.empty_message() == "No posts found"
    assert not page.show_pagination
    page.select_tab("reported")
    page.load()
    assert page.empty_message() == "No reported posts"


def test_hide_requires_confirmation_then_refetches_active_tab(admin_store, posts_client):
    posts_client.routes[("PUT", "/admin/posts/r1/hide")] = {"success": True}
    page = AdminPostsPage(admin_store, posts_client)
    page.mount()
    page.select_tab("reported")
    page.load()
    assert page.actions.dispatch("r1", page.hide).skipped
    assert posts_client.mutations() == []

    assert page.actions.dispatch("r1", page.hide, confirmed=True).ok
    assert posts_client.count("GET", "/admin/posts/reported") == 2
    assert posts_client.count("GET", "/posts/feed") == 0


def test_delete_failure_keeps_posts(admin_store, posts_client):
    posts_client.routes[("DELETE", "/posts/p1")] = RequestError("Not authorized", 403)
    page = AdminPostsPage(admin_store, posts_client)
    page.mount()
    page.load()
    result = page.actions.dispatch("p1", page.delete, confirmed=True)
    assert not result.ok
    assert page.actions.state.last_error == "Failed to delete post: Not authorized"
    assert [p["_id"] for p in page.posts] == ["p1"]
    assert not page.actions.is_busy("p1")


def test_hide_label_reflects_state():
    assert AdminPostsPage.hide_label({"isHidden": True}) == "Unhide"
    assert AdminPostsPage.hide_label({}) == "Hide"


def test_delete_from_reported_tab_refreshes_feed_on_return(admin_store, make_client):
    posts = {"p1": _post("p1"), "r1": _post("r1", isReported=True)}
    client = make_client(
        {
            ("GET", "/posts/feed"): lambda _p, _j: {"posts": list(posts.values())},
            ("GET", "/admin/posts/reported"): lambda _p, _j: {
                "data": [p for p in posts.values() if p.get("isReported")]
            },
            ("DELETE", "/posts/r1"): lambda _p, _j: posts.pop("r1") and {"success": True},
        }
    )
    page = AdminPostsPage(admin_store, client)
    page.mount()
    page.load()
    assert [p["_id"] for p in page.posts] == ["p1", "r1"]

    page.select_tab("reported")
    page.load()
    assert page.actions.dispatch("r1", page.delete, confirmed=True).ok
    assert page.posts == []

    page.select_tab("all")
    page.load()
    assert client.count("GET", "/posts/feed") == 2
    assert [p["_id"] for p in page.posts] == ["p1"]


def test_returning_to_a_loaded_tab_refetches(admin_store, posts_client):
    page = AdminPostsPage(admin_store, posts_client)
    page.mount()
    page.select_tab("reported")
    page.load()
    page.select_tab("all")
    page.load()
    page.select_tab("reported")
    page.load()
    assert posts_client.count("GET", "/admin/posts/reported") == 2
