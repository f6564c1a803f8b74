from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from gtin_case_code import db

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    String,
    Text,
)
from sqlalchemy.orm import (
    Mapped,
    mapped_column,
)

# ----------------------------
# Helpers
# ----------------------------

def utcnow() -> datetime:
    # SQLite has no real TZ; store UTC consistently.
    return datetime.now(timezone.utc)


# Column widths cover the longest GS1 payload (SSCC, 17 digits).
# The configured GTIN_MAX_LENGTH is enforced by the repository.
GTIN_COLUMN_LENGTH = 17
MASTER_CASE_CODE_COLUMN_LENGTH = GTIN_COLUMN_LENGTH + 3

# ----------------------------
# Models
# ----------------------------

class GtinRecord(db.Model):
    """
    A product GTIN with its GS1 check digit and master case code.

    check_digit and master_case_code are derived from gtin and must only be
    written through gtin_case_code.catalog.repository.
    """
    __tablename__ = "gtin"

    gtin: Mapped[str] = mapped_column(String(GTIN_COLUMN_LENGTH), primary_key=True)

    check_digit: Mapped[str] = mapped_column(String(1), nullable=False)

    master_case_code: Mapped[str] = mapped_column(
        String(MASTER_CASE_CODE_COLUMN_LENGTH),
        nullable=False,
        unique=True,
    )

    # Free text; changing it never touches the derived columns.
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("length(gtin) > 0", name="ck_gtin_nonempty"),
        CheckConstraint("length(check_digit) = 1", name="ck_gtin_check_digit_single"),
    )

    def __repr__(self) -> str:
        return f"<GtinRecord {self.gtin} check_digit={self.check_digit} master_case_code={self.master_case_code}>"
