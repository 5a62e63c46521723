from src.api.ui_integration.client import RequestError
from src.ui.context import navigate
from src.ui.pages.courses import CoursesPage
from src.ui.routes import COURSES, HOME, JOBS, MY_COURSES


def _courses(*ids, category="Programming"):
    return {"data": [{"_id": i, "title": f"Course {i}", "category": category} for i in ids]}


def test_public_without_session(store, make_client):
    client = make_client({("GET", "/courses"): _courses("c1", "c2")})
    page = CoursesPage(store, client)
    assert page.mount()
    assert page.context is None
    page.load()
    assert len(page.courses) == 2
    assert page.back_target == HOME


def test_category_filter_is_sent_and_not_refiltered(store, make_client):
    # backend returns a non-matching category on purpose: the page must not drop it
    client = make_client({("GET", "/courses"): _courses("d1", "d2", category="Business")})
    page = CoursesPage(store, client)
    page.mount()
    assert page.set_filter("category", "Design")
    page.load()
    assert client.calls == [("GET", "/courses", {"category": "Design"}, None)]
    assert [c["_id"] for c in page.courses] == ["d1", "d2"]


def test_each_filter_change_refetches(store, make_client):
    client = make_client({("GET", "/courses"): _courses("c1")})
    page = CoursesPage(store, client)
    page.mount()
    page.load()
    page.load()
    assert client.count("GET", "/courses") == 1
    page.set_filter("level", "beginner")
    page.load()
    page.set_filter("search", "python")
    page.load()
    assert [c[2] for c in client.calls] == [{}, {"level": "beginner"}, {"search": "python", "level": "beginner"}]


def test_empty_messages(store, make_client):
    client = make_client({("GET", "/courses"): {"data": []}})
    page = CoursesPage(store, client)
    page.mount()
    page.load()
    assert page.list.is_empty
    assert page.empty_message() == "No courses available yet"
    page.set_filter("category", "Design")
    assert page.empty_message() == "No courses found matching your criteria"


def test_students_go_back_to_their_courses(student_store, make_client):
    page = CoursesPage(student_store, make_client())
    page.mount()
    assert page.back_target == MY_COURSES


def test_failed_load_is_retried_on_next_mount(store, make_client):
    replies = [RequestError("Server error", 500), _courses("c1")]
    client = make_client({("GET", "/courses"): lambda _p, _j: replies.pop(0)})
    page = CoursesPage(store, client)
    page.mount()
    page.load()
    assert page.list.state.error == "Server error"

    page = CoursesPage(store, client)
    page.mount()
    page.load()
    assert client.count("GET", "/courses") == 2
    assert page.list.state.error is None
    assert [c["_id"] for c in page.courses] == ["c1"]


def test_coming_back_to_the_page_refetches(store, make_client):
    catalog = _courses("c1")
    client = make_client({("GET", "/courses"): lambda _p, _j: catalog})
    page = CoursesPage(store, client)
    page.mount()
    page.load()

    navigate(store, JOBS)
    catalog = _courses("c1", "c2")
    navigate(store, COURSES)
    page = CoursesPage(store, client)
    page.mount()
    page.load()
    assert client.count("GET", "/courses") == 2
    assert [c["_id"] for c in page.courses] == ["c1", "c2"]
