"""Tests for the in-memory transaction store."""
from scripts.seed_data import build_transactions, seed
from sales_report.store import TransactionStore


def test_starts_empty():
    s = TransactionStore()
    assert s.snapshot() == ()
    assert len(s) == 0
    assert s.loaded_at is None


def test_replace_overwrites_everything():
    s = TransactionStore()
    s.replace(build_transactions(count=5))
    s.replace(build_transactions(count=3, seed=7))
    assert len(s) == 3
    assert [t.id for t in s.snapshot()] == [1, 2, 3]
    assert s.loaded_at is not None


def test_snapshot_unaffected_by_later_replace():
    s = TransactionStore()
    s.replace(build_transactions(count=5))
    before = s.snapshot()
    s.replace([])
    assert len(before) == 5
    assert s.snapshot() == ()


def test_replace_copies_input():
    s = TransactionStore()
    records = build_transactions(count=4)
    s.replace(records)
    records.clear()
    assert len(s) == 4


def test_clear():
    s = TransactionStore()
    seed(s)
    s.clear()
    assert s.snapshot() == ()
    assert s.loaded_at is None


def test_seed_is_deterministic():
    assert build_transactions() == build_transactions()
    assert {t.date_of_sale.month for t in build_transactions()} == set(range(1, 13))
