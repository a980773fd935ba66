from datetime import UTC, datetime

from civica.db.store import MemoryStore
from civica.models.bill import Bill, BillPatch


def _make_bill(bill_id: str, jurisdiction: str = "federal", day: int = 1, **fields) -> Bill:
    return Bill(
        id=bill_id,
        title=fields.pop("title", f"Bill {bill_id}"),
        bill_type="H.R.",
        jurisdiction=jurisdiction,
        last_action_date=datetime(2025, 1, day, tzinfo=UTC),
        **fields
    )


def test_upsert_twice_equals_once(store: MemoryStore) -> None:
    bill = _make_bill("hr1")

    store.bills.upsert(bill)
    once = store.bills.list()
    store.bills.upsert(bill)
    twice = store.bills.list()

    assert once.total == twice.total == 1
    assert once.items == twice.items


def test_list_filters_by_jurisdiction_and_text(store: MemoryStore) -> None:
    store.bills.upsert_many([
        _make_bill("hr1", title="Border Water Act"),
        _make_bill("tx-hb1", jurisdiction="state", title="Texas Water Plan"),
        _make_bill("tx-hb2", jurisdiction="state", title="Property Tax Relief", sponsor="Rep. Water"),
    ])

    state = store.bills.list(jurisdiction="state")
    water = store.bills.list(query="WATER", jurisdiction="state")

    assert state.total == 2
    assert {b.id for b in water.items} == {"tx-hb1", "tx-hb2"}
    assert store.bills.list(jurisdiction="local").total == 0


def test_list_is_newest_first_with_disjoint_pages(store: MemoryStore) -> None:
    store.bills.upsert_many([_make_bill(f"b{day}", day=day) for day in range(1, 8)])
    store.bills.upsert(Bill(id="undated", title="Undated", bill_type="S."))

    first = store.bills.list(limit=3, offset=0)
    second = store.bills.list(limit=3, offset=3)
    rest = store.bills.list(limit=3, offset=6)

    ids = [b.id for b in first.items + second.items + rest.items]
    assert ids == ["b7", "b6", "b5", "b4", "b3", "b2", "b1", "undated"]
    assert not set(b.id for b in first.items) & set(b.id for b in second.items)


def test_update_sets_spanish_summary(store: MemoryStore) -> None:
    store.bills.upsert(_make_bill("hr1", summary="Funds water systems"))

    updated = store.bills.update("hr1", BillPatch(summary_es="Financia sistemas de agua"))

    assert updated.summary_es == "Financia sistemas de agua"
    assert updated.summary == "Funds water systems"


def test_seeded_store_loads_sample_data(seeded_store: MemoryStore) -> None:
    assert len(seeded_store.legislator_table) == 6
    assert len(seeded_store.event_table) == 6
    assert len(seeded_store.poll_table) == 3
    assert seeded_store.bills.list(jurisdiction="state").total == 5
    assert seeded_store.legislators.list(district="TX-23").items[0].id == "tony-gonzales-tx23"
