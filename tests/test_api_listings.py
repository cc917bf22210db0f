def _data(response):
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["status"] == 200
    return payload["data"]


def test_rooms_listing_envelope(client):
    data = _data(client.get("/api/rooms"))

    assert data["totalItems"] == 9
    assert data["totalPages"] == 1
    assert data["currentPage"] == 1
    assert data["pageSize"] == 10
    assert len(data["items"]) == 9
    assert data["items"][0]["roomNumber"] == "101"
    assert data["items"][0]["hotelName"] == "LuxeStay Grand Palace"


def test_rooms_search_matches_any_searchable_field(client):
    data = _data(client.get("/api/rooms", params={"search": "SUITE"}))

    assert {item["id"] for item in data["items"]} == {"r5", "r6", "r9"}


def test_rooms_sort_descending_by_price(client):
    data = _data(client.get("/api/rooms", params={"sortBy": "price", "sortOrder": "desc"}))

    prices = [item["price"] for item in data["items"]]
    assert prices == sorted(prices, reverse=True)
    assert prices[0] == 850


def test_rooms_status_filter_is_exact(client):
    data = _data(client.get("/api/rooms", params={"status": "available"}))

    assert data["totalItems"] == 7
    assert all(item["status"] == "available" for item in data["items"])


def test_rooms_paging(client):
    data = _data(client.get("/api/rooms", params={"page": 3, "pageSize": 4}))

    assert data["totalPages"] == 3
    assert [item["id"] for item in data["items"]] == ["r9"]


def test_page_size_out_of_bounds_is_rejected(client):
    for size in (0, 101):
        response = client.get("/api/rooms", params={"pageSize": size})

        assert response.status_code == 422
        payload = response.json()
        assert payload["success"] is False
        assert payload["code"] == "VALIDATION_ERROR"
        assert payload["data"] is None
        assert payload["trace_id"]


def test_room_detail_and_not_found(client):
    found = client.get("/api/rooms/r3")
    missing = client.get("/api/rooms/r404")

    assert found.json()["data"]["categoryName"] == "Deluxe Room"
    assert missing.status_code == 404
    payload = missing.json()
    assert payload["code"] == "NOT_FOUND"
    assert payload["details"] == {"resource": "room", "id": "r404"}
    assert payload["trace_id"] == missing.headers["X-Trace-ID"]


def test_guests_sorted_by_spend(client):
    data = _data(client.get("/api/guests", params={"sortBy": "totalSpent", "sortOrder": "desc"}))

    assert [item["name"] for item in data["items"]] == ["Michael Chen", "James Wilson", "Sarah Johnson"]


def test_guest_search_by_email(client):
    data = _data(client.get("/api/guests", params={"search": "sarah@"}))

    assert [item["id"] for item in data["items"]] == ["g2"]


def test_bookings_date_window_and_status(client):
    window = _data(client.get("/api/bookings", params={"dateFrom": "2024-01-20"}))
    confirmed = _data(client.get("/api/bookings", params={"status": "confirmed", "dateTo": "2024-01-20"}))

    assert {item["id"] for item in window["items"]} == {"b2", "b3"}
    assert [item["id"] for item in confirmed["items"]] == ["b2"]


def test_bookings_sorted_by_check_in(client):
    data = _data(client.get("/api/bookings", params={"sortBy": "checkIn", "sortOrder": "desc"}))

    assert [item["checkIn"] for item in data["items"]] == ["2024-01-22", "2024-01-20", "2024-01-15"]
    assert data["items"][0]["guestName"] == "Michael Chen"
