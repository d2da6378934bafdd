# receipt_processor/repository.py
from typing import Optional, Protocol
from sqlalchemy.orm import Session
from .models import ReceiptScore

class ScoreRepository(Protocol):
    def create(self, points: int) -> int: ...
    def find_by_id(self, receipt_id: int) -> Optional[ReceiptScore]: ...

class SqlScoreRepository:
    """ScoreRepository over a SQLAlchemy session; ids come from the primary key."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, points: int) -> int:
        rec = ReceiptScore(points=points)
        try:
            self.db.add(rec)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return rec.id

    def find_by_id(self, receipt_id: int) -> Optional[ReceiptScore]:
        return self.db.get(ReceiptScore, receipt_id)
