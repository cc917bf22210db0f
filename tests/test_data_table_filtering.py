from shared.data_table import Column, apply_filters

NAME = [Column("name", "Name")]


def test_global_search_is_case_insensitive_substring(people):
    result = apply_filters(people, NAME, "an")

    assert result == [{"name": "Ann", "age": None}]


def test_filter_result_is_an_ordered_subset(people):
    result = apply_filters(people, NAME, "a")
    positions = [people.index(row) for row in result]

    assert all(row in people for row in result)
    assert positions == sorted(positions)


def test_filtering_twice_changes_nothing(people):
    once = apply_filters(people, NAME, "b")

    assert apply_filters(once, NAME, "b") == once


def test_empty_search_keeps_everything(people):
    assert apply_filters(people, NAME, "") == people


def test_non_searchable_columns_are_ignored_by_global_search():
    rows = [{"room": "101", "image": "lobby.jpg"}, {"room": "lobby view", "image": None}]
    columns = [Column("room", "Room"), Column("image", "Image", searchable=False)]

    assert apply_filters(rows, columns, "lobby") == [rows[1]]


def test_column_filters_combine_with_search():
    rows = [
        {"room": "101", "status": "available", "hotel": "Grand Palace"},
        {"room": "102", "status": "occupied", "hotel": "Grand Palace"},
        {"room": "201", "status": "available", "hotel": "Marina Bay"},
    ]
    columns = [Column("room", "Room"), Column("status", "Status"), Column("hotel", "Hotel")]

    result = apply_filters(rows, columns, "grand", {"status": "AVAIL", "room": ""})

    assert result == [rows[0]]


def test_unknown_filter_key_is_resolved_as_path():
    rows = [{"guest": {"email": "james@email.com"}}, {"guest": {"email": "sarah@email.com"}}]

    assert apply_filters(rows, [], column_filters={"guest.email": "SARAH"}) == [rows[1]]


def test_non_string_values_are_searchable():
    rows = [{"floor": 2, "price": 150.0, "promoted": True}, {"floor": 3, "price": 450.5, "promoted": False}]
    columns = [Column("floor", "Floor"), Column("price", "Price"), Column("promoted", "Promoted")]

    assert apply_filters(rows, columns, "150") == [rows[0]]
    assert apply_filters(rows, columns, "450.5") == [rows[1]]
    assert apply_filters(rows, columns, "true") == [rows[0]]


def test_missing_values_never_match_a_non_empty_search():
    rows = [{"phone": None}, {"phone": "+1 555-0101"}]

    assert apply_filters(rows, [Column("phone", "Phone")], "555") == [rows[1]]
