from luxestay_control.app.export.csv_exporter import export_current_view
from luxestay_control.app.modules import ROOM_COLUMNS
from shared.data_table import DataTable

ROOMS = [
    {"roomNumber": "201", "categoryName": "Deluxe Room", "hotelName": "Grand", "floor": 2, "status": "available", "price": 280.0},
    {"roomNumber": "101", "categoryName": "Standard Room", "hotelName": "Grand", "floor": 1, "status": "available", "price": 150.0},
    {"roomNumber": "101", "categoryName": "Standard Room", "hotelName": "Marina", "floor": 1, "status": "occupied", "price": 180.0},
]


def test_export_writes_every_filtered_row_in_view_order(tmp_path):
    table = DataTable(ROOM_COLUMNS, ROOMS, page_size=1)
    table.search("grand")
    table.toggle_sort("price")

    path = export_current_view(module="rooms", table=table, output_dir=str(tmp_path / "exports"))

    assert path.exists()
    assert path.name.startswith("rooms_")
    lines = path.read_text(encoding="utf-8-sig").splitlines()
    assert lines[1] == "# module: rooms"
    assert lines[2] == "# filters: {'search': 'grand'}"
    assert lines[3] == "# sort: price asc"
    assert lines[4] == "Room,Category,Hotel,Floor,Status,Price"
    assert lines[5:] == [
        "101,Standard Room,Grand,1,available,150",
        "201,Deluxe Room,Grand,2,available,280",
    ]


def test_export_of_unsorted_view(tmp_path):
    table = DataTable(ROOM_COLUMNS, ROOMS)

    path = export_current_view(module="rooms", table=table, output_dir=str(tmp_path))

    content = path.read_text(encoding="utf-8-sig")
    assert "# sort: none" in content
    assert content.count("\n") == 8
