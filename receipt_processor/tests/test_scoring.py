# tests/test_scoring.py
import pytest

from receipt_processor.errors import ReceiptNotFound
from receipt_processor.models import ReceiptScore
from receipt_processor.repository import SqlScoreRepository
from receipt_processor.services.scoring import ScoringService


class FakeRepository:
    def __init__(self):
        self.rows = {}

    def create(self, points):
        new_id = len(self.rows) + 1
        self.rows[new_id] = ReceiptScore(id=new_id, points=points)
        return new_id

    def find_by_id(self, receipt_id):
        return self.rows.get(receipt_id)


def test_submit_stores_the_total(target_receipt):
    repo = FakeRepository()
    receipt_id = ScoringService(repo).submit(target_receipt)
    assert repo.rows[receipt_id].points == 12


def test_submit_is_not_idempotent(target_receipt):
    service = ScoringService(FakeRepository())
    first = service.submit(target_receipt)
    second = service.submit(target_receipt)
    assert first != second
    assert service.lookup(first) == service.lookup(second) == 12


def test_lookup_is_repeatable(receipt_factory):
    service = ScoringService(FakeRepository())
    receipt_id = service.submit(receipt_factory(retailer="Walmart", total="81.25"))
    assert service.lookup(receipt_id) == 32
    assert service.lookup(receipt_id) == 32


def test_lookup_unknown_id_raises():
    with pytest.raises(ReceiptNotFound) as exc:
        ScoringService(FakeRepository()).lookup(2)
    assert exc.value.receipt_id == 2
    assert str(exc.value) == "Receipt with ID [2] could not be found"


def test_sql_repository_assigns_increasing_ids(db):
    repo = SqlScoreRepository(db)
    ids = [repo.create(p) for p in (36, 17, 12)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3
    assert repo.find_by_id(ids[0]).points == 36
    assert repo.find_by_id(ids[-1] + 100) is None


def test_service_with_sql_repository(db, target_receipt):
    service = ScoringService(SqlScoreRepository(db))
    receipt_id = service.submit(target_receipt)
    assert service.lookup(receipt_id) == 12
