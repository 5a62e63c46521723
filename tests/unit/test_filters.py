from src.ui.filters import FilterController


def test_changing_tab_resets_page(store):
    fc = FilterController(store, "demo.filters")
    fc.next_page()
    fc.next_page()
    assert fc.state.page == 3
    assert fc.set("tab", "reported")
    assert fc.state.page == 1


def test_setting_same_value_is_a_noop(store):
    fc = FilterController(store, "demo.filters")
    fc.next_page()
    assert not fc.set("filter", "all")
    assert fc.state.page == 2


def test_prev_disabled_on_first_page(store):
    fc = FilterController(store, "demo.filters")
    assert not fc.can_go_prev
    assert not fc.prev_page()
    assert fc.state.page == 1


def test_next_is_never_disabled(store):
    fc = FilterController(store, "demo.filters")
    for _ in range(5):
        assert fc.can_go_next
        assert fc.next_page()
    assert fc.state.page == 6


def test_query_params_skip_empty_values(store):
    fc = FilterController(store, "demo.filters")
    assert fc.query_params() == {}
    fc.set("category", "Design")
    fc.set("search", "python")
    assert fc.query_params() == {"search": "python", "category": "Design"}


def test_custom_defaults_and_resets(store):
    fc = FilterController(store, "demo.filters", defaults={"filter": "pending"}, resets={})
    assert fc.state.filter == "pending"
    fc.next_page()
    fc.set("filter", "active")
    assert fc.state.page == 2
    assert fc.as_dict()["filter"] == "active"
