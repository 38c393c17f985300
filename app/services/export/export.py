"""CSV and Excel renderings of the project collection."""
import csv
import io
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from app.database.store import EntityStore
from app.models.project.project import ProjectFilters
from app.services.query.fields import PROJECT_FIELDS
from app.services.query.query_engine import sort_records

# (header, record key, column width)
EXPORT_COLUMNS = [
    ("Name", "name", 30),
    ("Owner", "owner", 25),
    ("Energy Type", "energy_type", 15),
    ("Capacity (MW)", "capacity", 15),
    ("Location", "location", 25),
    ("Status", "status", 15),
    ("Year", "year", 10),
    ("Latitude", "latitude", 15),
    ("Longitude", "longitude", 15),
]

ENERGY_TYPE_FILLS = {
    "solar": "FFFFCC00",
    "wind": "FF87CEEB",
    "hydro": "FF00BFFF",
    "biomass": "FF90EE90",
    "geothermal": "FFE6E6FA",
}

CSV_MEDIA_TYPE = "text/csv"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_filename(extension: str, today: Optional[date] = None) -> str:
    return f"projects_{(today or date.today()).isoformat()}.{extension}"


def _row(project: Mapping[str, Any]) -> List[Any]:
    return [project.get(key) for _, key, _ in EXPORT_COLUMNS]


def projects_to_csv(projects: Iterable[Mapping[str, Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([header for header, _, _ in EXPORT_COLUMNS])
    for project in projects:
        writer.writerow(["" if value is None else value for value in _row(project)])
    return buffer.getvalue()


def projects_to_excel(projects: Iterable[Mapping[str, Any]]) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Projects"

    sheet.append([header for header, _, _ in EXPORT_COLUMNS])
    for index, (_, _, width) in enumerate(EXPORT_COLUMNS, start=1):
        sheet.column_dimensions[sheet.cell(row=1, column=index).column_letter].width = width

    header_fill = PatternFill(start_color="FFD3D3D3", end_color="FFD3D3D3", fill_type="solid")
    for cell in sheet[1]:
        cell.font = Font(bold=True, size=12)
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center", vertical="center")

    energy_column = [key for _, key, _ in EXPORT_COLUMNS].index("energy_type") + 1
    for project in projects:
        sheet.append(_row(project))
        color = ENERGY_TYPE_FILLS.get(str(project.get("energy_type", "")).lower())
        if color:
            sheet.cell(row=sheet.max_row, column=energy_column).fill = PatternFill(
                start_color=color, end_color=color, fill_type="solid"
            )

    thin = Side(style="thin")
    border = Border(top=thin, left=thin, bottom=thin, right=thin)
    for row in sheet.iter_rows(min_row=1, max_row=sheet.max_row, max_col=len(EXPORT_COLUMNS)):
        for cell in row:
            cell.border = border

    output = io.BytesIO()
    workbook.save(output)
    return output.getvalue()


async def collect_projects_for_export(store: EntityStore) -> List[dict]:
    """Whole collection, unfiltered and unpaginated, newest first."""
    records = await store.list()
    return sort_records(records, ProjectFilters(), PROJECT_FIELDS)
