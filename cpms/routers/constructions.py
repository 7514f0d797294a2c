"""Construction API router. Validates requests and delegates to the service layer."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from cpms.database import get_db
from cpms.middleware.auth_middleware import get_creator_id, require_writer
from cpms.schemas.common import ErrorResponse
from cpms.schemas.construction import ConstructionCreate, ConstructionOut, ConstructionUpdate
from cpms.services import construction_service

router = APIRouter(prefix="/constructions", tags=["constructions"])


@router.get("", response_model=List[ConstructionOut])
def list_constructions(db: Session = Depends(get_db)):
    return construction_service.list_constructions(db)


@router.get("/{construction_id}", response_model=ConstructionOut, responses={404: {"description": "Not found"}})
def get_construction(construction_id: int, db: Session = Depends(get_db)):
    return construction_service.get_construction(db, construction_id)


@router.post(
    "",
    response_model=ConstructionOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def create_construction(
    data: ConstructionCreate,
    response: Response,
    db: Session = Depends(get_db),
    creator_id: int = Depends(get_creator_id),
):
    construction = construction_service.create_construction(db, data, creator_id)
    response.headers["Location"] = f"/constructions/{construction.id}"
    return construction


@router.put(
    "/{construction_id}",
    response_model=ConstructionOut,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 404: {"description": "Not found"}},
)
def update_construction(
    construction_id: int,
    data: ConstructionUpdate,
    db: Session = Depends(get_db),
    _writer=Depends(require_writer),
):
    return construction_service.update_construction(db, construction_id, data)


@router.delete("/{construction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_construction(
    construction_id: int,
    db: Session = Depends(get_db),
    _writer=Depends(require_writer),
):
    construction_service.delete_construction(db, construction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
