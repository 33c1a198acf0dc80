"""Parse product import files and push their rows to the API one at a time."""
from __future__ import annotations

import asyncio
import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

import openpyxl

from src.services.api_client import InventoryAPIError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "quantity")


class ImportFileError(Exception):
    """Raised when an uploaded file cannot be read as a product table."""


def parse_csv(source: Union[str, Path, bytes]) -> list[dict]:
    """Parse a header-row CSV into one dict per data row.

    Args:
        source: File path (str/Path) or raw file bytes (e.g. from an upload).

    Returns:
        Rows keyed by header name. Extra columns are kept verbatim so they
        reach the create endpoint unchanged.
    """
    if isinstance(source, bytes):
        try:
            text = source.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ImportFileError("CSV file is not valid UTF-8.") from exc
    else:
        text = Path(source).read_text(encoding="utf-8-sig")

    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames:
        return []
    _check_header(reader.fieldnames)

    rows = []
    for row in reader:
        # DictReader stores overflow cells under a None key
        row.pop(None, None)
        rows.append({key: (value or "") for key, value in row.items() if key})
    return rows


def parse_xlsx(source: Union[str, Path, bytes]) -> list[dict]:
    """Parse the first sheet of a workbook; row 1 holds the column names."""
    try:
        if isinstance(source, bytes):
            wb = openpyxl.load_workbook(io.BytesIO(source), read_only=True, data_only=True)
        else:
            wb = openpyxl.load_workbook(str(source), read_only=True, data_only=True)
    except Exception as exc:
        raise ImportFileError(f"Could not open workbook: {exc}") from exc

    try:
        ws = wb[wb.sheetnames[0]]
        row_iter = ws.iter_rows(values_only=True)
        header_row = next(row_iter, None)
        if not header_row:
            return []
        headers = [str(h).strip() if h is not None else "" for h in header_row]
        _check_header(headers)

        rows = []
        for values in row_iter:
            if values is None or all(v is None for v in values):
                continue
            row = {}
            for key, value in zip(headers, values):
                if key:
                    row[key] = _cell_text(value)
            rows.append(row)
        return rows
    finally:
        wb.close()


def parse_import_file(filename: str, content: bytes) -> list[dict]:
    """Dispatch on the file extension (.csv or .xlsx)."""
    suffix = Path(filename or "").suffix.lower()
    if suffix == ".xlsx":
        return parse_xlsx(content)
    if suffix in (".csv", ""):
        return parse_csv(content)
    raise ImportFileError(f"Unsupported file type: {suffix}")


def is_importable(row: dict) -> bool:
    """A row needs a non-empty name and quantity to be sent.

    Values are checked as read; whitespace-only cells count as present and
    are left for the backend to accept or reject.
    """
    return all(row.get(col) for col in REQUIRED_COLUMNS)


@dataclass
class ImportResult:
    imported: list[str] = field(default_factory=list)
    skipped: int = 0
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.imported) + self.skipped + len(self.failed)


async def import_rows(
    rows: list[dict],
    create: Callable[[dict], object],
    on_imported: Optional[Callable[[dict], None]] = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
) -> ImportResult:
    """Send importable rows to *create* strictly one after another.

    *create* is a blocking call (run in the default executor). A failing row
    is recorded and the import moves on to the next one.
    """
    result = ImportResult()
    loop = asyncio.get_event_loop()
    total = len(rows)
    for idx, row in enumerate(rows, start=1):
        if on_progress:
            on_progress(idx, total)
        if not is_importable(row):
            result.skipped += 1
            continue
        name = str(row["name"])
        try:
            await loop.run_in_executor(None, create, row)
        except InventoryAPIError as exc:
            logger.error("Import failed for row %d (%s): %s", idx, name, exc)
            result.failed.append((name, str(exc)))
            continue
        result.imported.append(name)
        if on_imported:
            on_imported(row)
    logger.info(
        "Import finished: %d imported, %d skipped, %d failed",
        len(result.imported), result.skipped, len(result.failed),
    )
    return result


def _check_header(headers) -> None:
    present = set(headers)
    missing = [col for col in REQUIRED_COLUMNS if col not in present]
    if missing:
        raise ImportFileError(f"Missing required column(s): {', '.join(missing)}")


def _cell_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
