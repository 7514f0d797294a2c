"""SQLAlchemy model for construction projects."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func
from cpms.database import Base
from cpms.utils.helpers import from_utc_to_local, to_utc, utc_now


STAGE_CONCEPT = 1
STAGE_DESIGN_DOCUMENTATION = 2
STAGE_PRE_CONSTRUCTION = 3
STAGE_CONSTRUCTION = 4

STAGE_LABELS = {
    STAGE_CONCEPT: "Concept",
    STAGE_DESIGN_DOCUMENTATION: "Design & Documentation",
    STAGE_PRE_CONSTRUCTION: "Pre-Construction",
    STAGE_CONSTRUCTION: "Construction",
}


class Construction(Base):
    __tablename__ = "constructions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    location = Column(String(500), nullable=False)
    stage = Column(Integer, nullable=False)
    category = Column(Text, nullable=False)  # Education/Health/Office/Other
    details = Column(Text, nullable=False)
    # Naive UTC; SQLite drops tzinfo on the way back.
    start_date = Column(DateTime, nullable=False)
    creator_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    __table_args__ = (
        Index("idx_construction_creator", "creator_id"),
    )

    def set_start_date_from_local(self, value: Optional[datetime]) -> None:
        utc_value = to_utc(value) if value is not None else utc_now()
        self.start_date = utc_value.replace(tzinfo=None)

    @property
    def start_date_local(self) -> Optional[datetime]:
        if self.start_date is None:
            return None
        return from_utc_to_local(self.start_date)

    @property
    def stage_label(self) -> Optional[str]:
        return STAGE_LABELS.get(self.stage)
