"""Construction project service layer: start-date rule and CRUD over the session."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from cpms.errors import BusinessRuleError, NotFoundError
from cpms.models.construction import Construction, STAGE_CONSTRUCTION
from cpms.schemas.construction import ConstructionCreate, ConstructionUpdate
from cpms.utils.helpers import to_utc, utc_now

logger = logging.getLogger(__name__)

FUTURE_START_DATE_MESSAGE = "StartDate must be a future date for non Construction stage project."


def validate_construction(stage: int, start_date: Optional[datetime], now: Optional[datetime] = None) -> None:
    """Reject a non-Construction stage project whose start date is not in the future.

    ``start_date`` is the client value (naive means local time); when absent the
    current instant is used, so stages below Construction always fail without it.
    ``now`` must be timezone-aware when given.
    """
    now_utc = now if now is not None else utc_now()
    effective_start = to_utc(start_date) if start_date is not None else now_utc
    if stage < STAGE_CONSTRUCTION and effective_start <= now_utc:
        raise BusinessRuleError(FUTURE_START_DATE_MESSAGE)


def list_constructions(db: Session) -> List[Construction]:
    return db.query(Construction).order_by(Construction.id).all()


def get_construction(db: Session, construction_id: int) -> Construction:
    construction = db.query(Construction).filter(Construction.id == construction_id).first()
    if not construction:
        raise NotFoundError(f"Construction {construction_id} not found")
    return construction


def _apply(construction: Construction, data: ConstructionCreate) -> None:
    construction.name = data.name
    construction.location = data.location
    construction.stage = data.stage
    construction.category = data.category
    construction.details = data.details
    construction.set_start_date_from_local(data.start_date)


def create_construction(db: Session, data: ConstructionCreate, creator_id: int) -> Construction:
    try:
        validate_construction(data.stage, data.start_date)
    except BusinessRuleError:
        logger.info("rejected construction create: stage=%s start_date=%s", data.stage, data.start_date)
        raise

    construction = Construction(creator_id=creator_id)
    _apply(construction, data)
    db.add(construction)
    db.commit()
    db.refresh(construction)
    logger.info("created construction id=%s creator_id=%s", construction.id, creator_id)
    return construction


def update_construction(db: Session, construction_id: int, data: ConstructionUpdate) -> Construction:
    construction = get_construction(db, construction_id)
    try:
        validate_construction(data.stage, data.start_date)
    except BusinessRuleError:
        logger.info(
            "rejected construction update: id=%s stage=%s start_date=%s",
            construction_id, data.stage, data.start_date,
        )
        raise

    _apply(construction, data)
    db.commit()
    db.refresh(construction)
    logger.info("updated construction id=%s", construction.id)
    return construction


def delete_construction(db: Session, construction_id: int) -> None:
    construction = get_construction(db, construction_id)
    db.delete(construction)
    db.commit()
    logger.info("deleted construction id=%s", construction_id)
