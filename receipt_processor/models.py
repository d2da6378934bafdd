from __future__ import annotations
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import BigInteger, Integer, DateTime, CheckConstraint, func
from .database import Base

# ----------------------------
# Receipt scores (write-once)
# ----------------------------
# SQLite only auto-increments INTEGER PRIMARY KEY
BigIntId = BigInteger().with_variant(Integer, "sqlite")

class ReceiptScore(Base):
    __tablename__ = "receipt_scores"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    points: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint("points >= 0", name="ck_receipt_scores_points_non_negative"),
    )

    def __repr__(self) -> str:
        return f"ReceiptScore(id={self.id!r}, points={self.points!r})"
