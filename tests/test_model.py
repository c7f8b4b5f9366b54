from __future__ import annotations

from invoicer.core.model import (
    ITEM_FIELDS,
    SCALAR_FIELDS,
    InvoiceData,
    InvoiceItem,
    empty_item,
    new_invoice_data,
    scalar_field_names,
)


def test_empty_item_has_blank_fields() -> None:
    item = empty_item()
    assert all(getattr(item, name) == "" for name, _label in ITEM_FIELDS)


def test_new_invoice_data_is_blank_with_one_item() -> None:
    data = new_invoice_data()
    assert len(data.items) == 1
    assert data.items[0] == InvoiceItem()
    assert all(getattr(data, name) == "" for name in scalar_field_names())


def test_new_invoice_data_items_are_independent() -> None:
    a = new_invoice_data()
    b = new_invoice_data()
    assert a.items is not b.items
    a.items.append(empty_item())
    a.items[0].description = "Cables"
    assert len(b.items) == 1
    assert b.items[0].description == ""


def test_default_constructor_does_not_share_items() -> None:
    a = InvoiceData()
    b = InvoiceData()
    a.items.append(empty_item())
    assert len(b.items) == 1


def test_copy_is_deep() -> None:
    data = new_invoice_data()
    data.company_name = "Acme LLC"
    data.items[0].quantity = "2"
    dup = data.copy()
    assert dup == data
    dup.items[0].quantity = "5"
    dup.items.append(empty_item())
    assert data.items[0].quantity == "2"
    assert len(data.items) == 1


def test_scalar_fields_cover_every_scalar_attribute() -> None:
    assert [name for name, _label in SCALAR_FIELDS] == list(scalar_field_names())
    assert "items" not in scalar_field_names()
