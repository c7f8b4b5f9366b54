from __future__ import annotations

from invoicer.core.model import new_invoice_data, scalar_field_names
from invoicer.core.workspace import Workspace


def test_add_invoice_appends_and_activates() -> None:
    ws = Workspace()
    ids = [ws.add_invoice().id for _ in range(4)]
    assert len(ws) == 4
    assert len(set(ids)) == 4
    assert [inv.id for inv in ws] == ids
    assert ws.active_id == ids[-1]


def test_added_invoice_is_blank() -> None:
    ws = Workspace()
    ws.add_invoice()
    active = ws.active_invoice()
    assert active is not None
    assert active.logo == ""
    assert len(active.data.items) == 1
    assert all(getattr(active.data, name) == "" for name in scalar_field_names())


def test_save_without_logo_keeps_logo() -> None:
    ws = Workspace()
    rec = ws.add_invoice()
    ws.save_invoice(rec.id, rec.data, "data:image/png;base64,AAAA")
    data = new_invoice_data()
    data.company_name = "Acme LLC"
    assert ws.save_invoice(rec.id, data) is True
    stored = ws.get(rec.id)
    assert stored.data.company_name == "Acme LLC"
    assert stored.logo == "data:image/png;base64,AAAA"


def test_save_with_logo_replaces_it() -> None:
    ws = Workspace()
    rec = ws.add_invoice()
    ws.save_invoice(rec.id, rec.data, "data:image/png;base64,AAAA")
    ws.save_invoice(rec.id, rec.data, "")
    assert ws.get(rec.id).logo == ""


def test_saved_data_is_decoupled_from_caller() -> None:
    ws = Workspace()
    rec = ws.add_invoice()
    data = new_invoice_data()
    ws.save_invoice(rec.id, data)
    data.items[0].description = "changed later"
    assert ws.get(rec.id).data.items[0].description == ""


def test_save_unknown_id_is_noop() -> None:
    ws = Workspace()
    rec = ws.add_invoice()
    before = ws.get(rec.id).data
    assert ws.save_invoice("missing", new_invoice_data(), "x") is False
    assert ws.get(rec.id).data is before
    assert len(ws) == 1


def test_delete_active_selects_first_remaining() -> None:
    ws = Workspace()
    first = ws.add_invoice()
    ws.add_invoice()
    third = ws.add_invoice()
    assert ws.active_id == third.id
    ws.delete_invoice(third.id)
    assert ws.active_id == first.id
    assert len(ws) == 2


def test_delete_only_invoice_clears_selection() -> None:
    ws = Workspace()
    rec = ws.add_invoice()
    ws.delete_invoice(rec.id)
    assert ws.is_empty()
    assert ws.active_id is None
    assert ws.active_invoice() is None


def test_delete_inactive_keeps_selection() -> None:
    ws = Workspace()
    first = ws.add_invoice()
    second = ws.add_invoice()
    ws.delete_invoice(first.id)
    assert ws.active_id == second.id


def test_delete_unknown_id_is_noop() -> None:
    ws = Workspace()
    rec = ws.add_invoice()
    assert ws.delete_invoice("missing") is False
    assert ws.active_id == rec.id
    assert len(ws) == 1


def test_select_and_stale_active() -> None:
    ws = Workspace()
    first = ws.add_invoice()
    ws.add_invoice()
    assert ws.select(first.id) is True
    assert ws.active_invoice().id == first.id
    assert ws.select("missing") is False
    assert ws.active_id == first.id
    ws.active_id = "stale"
    assert ws.active_invoice() is None
