from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from shared.data_table import DataTable, column_value, value_string


def export_current_view(
    *,
    module: str,
    table: DataTable,
    output_dir: str = "out/exports",
) -> Path:
    """Write every filtered and sorted row (not just the current page) to CSV."""
    destination = Path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    now = datetime.now().astimezone()
    path = destination / f"{module}_{now.strftime('%Y%m%d_%H%M%S')}.csv"
    state = table.state
    filters = {"search": state.global_search, **state.column_filters}
    sort = f"{state.sort.column} {state.sort.direction.value}" if state.sort.is_active else "none"

    with path.open("w", newline="", encoding="utf-8-sig") as handle:
        handle.write(f"# timestamp_local: {now.isoformat()}\n")
        handle.write(f"# module: {module}\n")
        handle.write(f"# filters: {filters}\n")
        handle.write(f"# sort: {sort}\n")
        writer = csv.writer(handle)
        writer.writerow([column.header for column in table.columns])
        for row in table.sorted_rows():
            writer.writerow([value_string(column_value(row, column)) for column in table.columns])

    return path
