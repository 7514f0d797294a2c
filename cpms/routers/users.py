"""Users API router. Registration, lookup, deletion and login."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from cpms.database import get_db
from cpms.middleware.auth_middleware import get_current_user
from cpms.models.user import User
from cpms.schemas.common import ErrorResponse
from cpms.schemas.user import LoginRequest, TokenResponse, UserCreate, UserOut
from cpms.services import auth_service, user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_user(data: UserCreate, response: Response, db: Session = Depends(get_db)):
    user = user_service.create_user(db, data)
    response.headers["Location"] = f"/users/{user.id}"
    return user


@router.post("/login", response_model=TokenResponse, responses={401: {"model": ErrorResponse}})
def login(request: LoginRequest, db: Session = Depends(get_db)):
    return TokenResponse(token=auth_service.login(db, request))


@router.get("/me", response_model=UserOut, responses={401: {"model": ErrorResponse}})
def me(current_user: User = Depends(get_current_user)):
    return current_user


@router.get("/{user_id}", response_model=UserOut, responses={404: {"description": "Not found"}})
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
