"""Tests for CSV/XLSX parsing and the sequential row import."""
import asyncio

import openpyxl
import pytest

from src.services.api_client import SaveError
from src.services.csv_importer import (
    ImportFileError,
    import_rows,
    is_importable,
    parse_csv,
    parse_import_file,
    parse_xlsx,
)


class TestParseCsv:
    def test_rows_keyed_by_header(self):
        rows = parse_csv(b"name,quantity,description\nBolt,5,M6 steel\nNut,0,\n")
        assert rows == [
            {"name": "Bolt", "quantity": "5", "description": "M6 steel"},
            {"name": "Nut", "quantity": "0", "description": ""},
        ]

    def test_extra_columns_pass_through(self):
        rows = parse_csv(b"name,quantity,supplier\nBolt,5,Acme\n")
        assert rows[0]["supplier"] == "Acme"

    def test_header_and_values_are_not_trimmed(self):
        rows = parse_csv(b"name,quantity, Supplier \n Bolt ,5, Acme \n")
        assert rows == [{"name": " Bolt ", "quantity": "5", " Supplier ": " Acme "}]

    def test_padded_required_header_is_missing(self):
        with pytest.raises(ImportFileError, match="name"):
            parse_csv(b" name ,quantity\nBolt,5\n")

    def test_utf8_bom_is_ignored(self):
        rows = parse_csv("\ufeffname,quantity\nBolt,5\n".encode("utf-8"))
        assert rows[0]["name"] == "Bolt"

    def test_short_rows_fill_blank(self):
        rows = parse_csv(b"name,quantity\nBolt\n")
        assert rows == [{"name": "Bolt", "quantity": ""}]

    def test_missing_required_column(self):
        with pytest.raises(ImportFileError, match="quantity"):
            parse_csv(b"name,stock\nBolt,5\n")

    def test_empty_file(self):
        assert parse_csv(b"") == []

    def test_reads_from_path(self, tmp_path):
        path = tmp_path / "stock.csv"
        path.write_text("name,quantity\nWasher,12\n", encoding="utf-8")
        assert parse_csv(path) == [{"name": "Washer", "quantity": "12"}]

    def test_non_utf8_rejected(self):
        with pytest.raises(ImportFileError):
            parse_csv(b"name,quantity\n\xff\xfe,1\n")


class TestParseXlsx:
    def _workbook(self, tmp_path, rows):
        wb = openpyxl.Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        path = tmp_path / "stock.xlsx"
        wb.save(path)
        return path

    def test_first_row_is_header(self, tmp_path):
        path = self._workbook(tmp_path, [
            ["name", "quantity", "description"],
            ["Bolt", 5, "M6"],
            [None, None, None],
            ["Nut", 0.0, None],
        ])
        assert parse_xlsx(path) == [
            {"name": "Bolt", "quantity": "5", "description": "M6"},
            {"name": "Nut", "quantity": "0", "description": ""},
        ]

    def test_dispatch_by_extension(self, tmp_path):
        path = self._workbook(tmp_path, [["name", "quantity"], ["Bolt", 3]])
        rows = parse_import_file("Stock.XLSX", path.read_bytes())
        assert rows == [{"name": "Bolt", "quantity": "3"}]

    def test_unsupported_extension(self):
        with pytest.raises(ImportFileError):
            parse_import_file("stock.pdf", b"%PDF")

    def test_corrupt_workbook(self):
        with pytest.raises(ImportFileError):
            parse_xlsx(b"not a zip file")


class TestIsImportable:
    @pytest.mark.parametrize(
        "row,expected",
        [
            ({"name": "Bolt", "quantity": "5"}, True),
            ({"name": "", "quantity": "5"}, False),
            ({"name": "Bolt", "quantity": ""}, False),
            ({"name": "  ", "quantity": "5"}, True),
            ({"name": "Bolt"}, False),
        ],
    )
    def test_requires_name_and_quantity(self, row, expected):
        assert is_importable(row) is expected


class TestImportRows:
    def test_valid_row_created_blank_name_skipped(self):
        created = []
        imported = []
        rows = [{"name": "Bolt", "quantity": "5"}, {"name": "", "quantity": "5"}]

        result = asyncio.run(import_rows(rows, created.append, on_imported=imported.append))

        assert created == [{"name": "Bolt", "quantity": "5"}]
        assert [r["name"] for r in imported] == ["Bolt"]
        assert result.imported == ["Bolt"]
        assert result.skipped == 1
        assert result.failed == []

    def test_rows_are_sent_in_order(self):
        created = []
        rows = [{"name": f"P{i}", "quantity": "1"} for i in range(5)]
        asyncio.run(import_rows(rows, lambda row: created.append(row["name"])))
        assert created == ["P0", "P1", "P2", "P3", "P4"]

    def test_failed_row_does_not_stop_import(self):
        def create(row):
            if row["name"] == "Bad":
                raise SaveError("HTTP 400", 400)

        rows = [
            {"name": "Good", "quantity": "1"},
            {"name": "Bad", "quantity": "1"},
            {"name": "Also good", "quantity": "2"},
        ]
        result = asyncio.run(import_rows(rows, create))
        assert result.imported == ["Good", "Also good"]
        assert [name for name, _ in result.failed] == ["Bad"]
        assert result.total == 3

    def test_progress_reports_every_row(self):
        progress = []
        rows = [{"name": "A", "quantity": "1"}, {"name": "", "quantity": ""}]
        asyncio.run(import_rows(rows, lambda row: None, on_progress=lambda i, n: progress.append((i, n))))
        assert progress == [(1, 2), (2, 2)]
