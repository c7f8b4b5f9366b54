from __future__ import annotations

from invoicer.core.model import ITEM_FIELDS, new_invoice_data
from invoicer.core.templates import (
    EXTENDED_MIN_ROWS,
    Template,
    export_filename,
    or_dash,
    tab_title,
    table_rows,
)


def test_export_filename_uses_voucher_or_draft() -> None:
    assert export_filename("INV-0042") == "invoice-INV-0042.pdf"
    assert export_filename("") == "invoice-draft.pdf"
    assert export_filename("   ") == "invoice-draft.pdf"


def test_export_filename_flattens_path_separators() -> None:
    assert export_filename("INV/2024/07") == "invoice-INV-2024-07.pdf"


def test_tab_title() -> None:
    data = new_invoice_data()
    assert tab_title(data) == "Draft"
    data.voucher_no = "V-9"
    data.company_name = "Acme LLC"
    assert tab_title(data) == "V-9 – Acme LLC"


def test_compact_rows_match_items() -> None:
    data = new_invoice_data()
    data.items[0].description = "Pump"
    rows = table_rows(data.items, Template.COMPACT)
    assert len(rows) == 1
    assert rows[0][1] == "Pump"
    assert len(rows[0]) == len(ITEM_FIELDS)


def test_extended_rows_are_padded_with_blanks() -> None:
    data = new_invoice_data()
    rows = table_rows(data.items, Template.EXTENDED)
    assert len(rows) == EXTENDED_MIN_ROWS
    assert all(cell == "" for row in rows[1:] for cell in row)


def test_extended_rows_not_truncated() -> None:
    data = new_invoice_data()
    data.items = data.items * (EXTENDED_MIN_ROWS + 3)
    assert len(table_rows(data.items, Template.EXTENDED)) == EXTENDED_MIN_ROWS + 3


def test_template_parse() -> None:
    assert Template.parse("Extended") is Template.EXTENDED
    assert Template.parse(Template.COMPACT) is Template.COMPACT
    assert Template.parse("fancy") is Template.COMPACT


def test_or_dash() -> None:
    assert or_dash("") == "—"
    assert or_dash("x") == "x"
