# scoring.py
from __future__ import annotations

from ..errors import ReceiptNotFound
from ..repository import ScoreRepository
from ..rules.engine import score_receipt
from ..schemas import Receipt
from ..utils.logging import logger

class ScoringService:
    """Runs the rule engine and keeps the resulting score under a new id."""

    def __init__(self, repository: ScoreRepository):
        self.repository = repository

    def submit(self, receipt: Receipt) -> int:
        """
        Score the receipt and persist the total.
        Not idempotent: identical receipts get distinct ids.
        """
        result = score_receipt(receipt)
        points = result["points"]
        logger.info("Receipt for retailer %r scored %d points %s",
                    receipt.retailer, points, result["rules"])
        receipt_id = self.repository.create(points)
        logger.info("Stored score %d under receipt id %s", points, receipt_id)
        return receipt_id

    def lookup(self, receipt_id: int) -> int:
        record = self.repository.find_by_id(receipt_id)
        if record is None:
            raise ReceiptNotFound(receipt_id)
        logger.info("Receipt id %s has %d points", receipt_id, record.points)
        return record.points
