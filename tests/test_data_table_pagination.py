import pytest

from shared.data_table import Column, DataTable, clamp_page, paginate, total_pages

ROWS = [{"n": index} for index in range(1, 26)]
COLUMNS = [Column("n", "N")]


def test_page_sizes_split_twenty_five_rows():
    table = DataTable(COLUMNS, ROWS, page_size=10)

    first = table.view()
    last = table.goto_page(3)

    assert len(first.rows) == 10
    assert first.total_pages == 3
    assert len(last.rows) == 5
    assert last.rows[0] == {"n": 21}


def test_changing_page_size_returns_to_first_page():
    table = DataTable(COLUMNS, ROWS, page_size=10)
    table.goto_page(3)

    view = table.set_page_size(5)

    assert view.page == 1
    assert len(view.rows) == 5
    assert view.total_pages == 5


@pytest.mark.parametrize("page_size", [1, 5, 7, 10, 25, 40])
def test_pages_concatenate_to_the_full_sequence(page_size):
    pages = total_pages(len(ROWS), page_size)
    joined = [row for page in range(1, pages + 1) for row in paginate(ROWS, page, page_size)]

    assert joined == ROWS


def test_no_rows_means_no_pages():
    assert total_pages(0, 10) == 0
    assert paginate([], 1, 10) == []


def test_clamp_page_bounds():
    assert clamp_page(0, 3) == 1
    assert clamp_page(7, 3) == 3
    assert clamp_page(5, 0) == 1


def test_page_past_the_end_is_empty():
    assert paginate(ROWS, 9, 10) == []


@pytest.mark.parametrize("page", [0, -1, -5])
def test_page_below_one_is_empty(page):
    assert paginate(ROWS, page, 10) == []
