from src.api.ui_integration.client import RequestError
from src.ui.list_view import ListState, ListView, invalidate_all


def _view(store, results):
    calls = []

    def fetch(params):
        calls.append(params)
        r = results.pop(0)
        if isinstance(r, Exception):
            raise r
        return r

    return ListView(store, "demo.list", fetch), calls


def test_success_replaces_items(store):
    view, calls = _view(store, [[{"_id": "1"}, {"_id": "2"}]])
    view.load({"status": "active"})
    assert len(view.items) == 2
    assert not view.state.loading
    assert view.state.error is None
    assert calls == [{"status": "active"}]


def test_failure_keeps_previous_items(store):
    view, _ = _view(store, [[{"_id": "1"}], RequestError("boom")])
    view.load({})
    view.reload()
    assert view.items == [{"_id": "1"}]
    assert view.state.error == "boom"
    assert not view.state.loading


def test_first_load_failure_leaves_empty_list(store):
    view, _ = _view(store, [RequestError("down")])
    view.load({})
    assert view.items == []
    assert view.state.error == "down"
    # an error is not the empty state
    assert not view.is_empty


def test_superseded_response_is_dropped(store):
    view, _ = _view(store, [])
    old = view.begin({"status": "pending"})
    new = view.begin({"status": "active"})
    assert view.resolve(new, [{"_id": "fresh"}])
    assert not view.resolve(old, [{"_id": "stale"}])
    assert view.items == [{"_id": "fresh"}]


def test_superseded_failure_is_dropped(store):
    view, _ = _view(store, [])
    old = view.begin({})
    new = view.begin({})
    view.resolve(new, [{"_id": "1"}])
    assert not view.fail(old, "late error")
    assert view.state.error is None


def test_ensure_loaded_fetches_once_per_params(store):
    view, calls = _view(store, [[{"_id": "1"}], [{"_id": "1"}], [{"_id": "2"}]])
    assert view.ensure_loaded({"page": 1})
    assert not view.ensure_loaded({"page": 1})
    assert view.ensure_loaded({"page": 2})
    view.invalidate()
    assert view.ensure_loaded({"page": 2})
    assert calls == [{"page": 1}, {"page": 2}, {"page": 2}]


def test_same_params_refetch_yields_same_items(store):
    view, _ = _view(store, [[{"_id": "a"}, {"_id": "b"}], [{"_id": "a"}, {"_id": "b"}]])
    view.load({"page": 1})
    first = list(view.items)
    view.reload()
    assert view.items == first


def test_state_survives_new_view_instance(store):
    view, _ = _view(store, [[{"_id": "1"}]])
    view.load({})
    again = ListView(store, "demo.list", lambda p: [])
    assert again.items == [{"_id": "1"}]


def test_ensure_loaded_retries_after_failure(store):
    view, calls = _view(store, [RequestError("down"), [{"_id": "1"}]])
    assert view.ensure_loaded({})
    assert view.state.error == "down"
    assert view.ensure_loaded({})
    assert view.items == [{"_id": "1"}]
    assert view.state.error is None
    assert not view.ensure_loaded({})
    assert len(calls) == 2


def test_invalidate_all_marks_every_list_stale(store):
    a, _ = _view(store, [[{"_id": "1"}], [{"_id": "2"}]])
    b = ListView(store, "other.list", lambda _p: [])
    a.ensure_loaded({})
    b.ensure_loaded({})
    store["page"] = "home"
    invalidate_all(store)
    assert all(v.stale for v in store.values() if isinstance(v, ListState))
    assert a.ensure_loaded({})
    assert a.items == [{"_id": "2"}]
