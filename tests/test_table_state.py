from shared.data_table import (
    UNSORTED,
    FirstPage,
    GotoPage,
    LastPage,
    NextPage,
    PrevPage,
    ResetFilters,
    ResetView,
    SetColumnFilter,
    SetGlobalSearch,
    SetPageSize,
    SortDirection,
    SortState,
    ToggleFilters,
    ToggleSort,
    has_active_filters,
    initial_state,
    reduce,
)


def _on_page(page: int):
    return reduce(initial_state(), GotoPage(page), total_pages=5)


def test_search_resets_page_and_leaves_old_state_untouched():
    state = _on_page(4)

    updated = reduce(state, SetGlobalSearch("suite"))

    assert updated.global_search == "suite"
    assert updated.page == 1
    assert state.page == 4
    assert state.global_search == ""


def test_column_filter_set_and_clear():
    state = reduce(_on_page(3), SetColumnFilter("status", "available"))
    assert state.column_filters == {"status": "available"}
    assert state.page == 1

    cleared = reduce(state, SetColumnFilter("status", ""))
    assert cleared.column_filters == {}
    assert state.column_filters == {"status": "available"}


def test_navigation_is_clamped_to_known_pages():
    state = initial_state()

    assert reduce(state, PrevPage(), total_pages=3).page == 1
    assert reduce(state, NextPage(), total_pages=3).page == 2
    assert reduce(state, LastPage(), total_pages=3).page == 3
    assert reduce(state, GotoPage(99), total_pages=3).page == 3
    assert reduce(_on_page(4), FirstPage(), total_pages=5).page == 1
    assert reduce(_on_page(3), NextPage(), total_pages=3).page == 3


def test_page_size_change_resets_page_and_ignores_nonsense():
    state = _on_page(4)

    assert reduce(state, SetPageSize(20)).page_size == 20
    assert reduce(state, SetPageSize(20)).page == 1
    assert reduce(state, SetPageSize(0)) is state


def test_sort_toggle_does_not_reset_page():
    state = reduce(_on_page(2), ToggleSort("price"))

    assert state.sort == SortState("price", SortDirection.ASC)
    assert state.page == 2


def test_reset_filters_keeps_sort_but_reset_view_clears_it():
    state = initial_state()
    for action in (ToggleSort("price"), SetGlobalSearch("deluxe"), SetColumnFilter("floor", "2")):
        state = reduce(state, action)

    filters_reset = reduce(state, ResetFilters())
    view_reset = reduce(state, ResetView())

    assert filters_reset.global_search == ""
    assert filters_reset.column_filters == {}
    assert filters_reset.sort == SortState("price", SortDirection.ASC)
    assert view_reset.sort == UNSORTED
    assert not has_active_filters(view_reset)


def test_toggle_filters_flips_panel_visibility():
    state = reduce(initial_state(), ToggleFilters())

    assert state.show_filters is True
    assert reduce(state, ToggleFilters()).show_filters is False


def test_active_filters_detection():
    assert not has_active_filters(initial_state())
    assert has_active_filters(reduce(initial_state(), SetGlobalSearch("x")))
    assert has_active_filters(reduce(initial_state(), SetColumnFilter("status", "x")))
