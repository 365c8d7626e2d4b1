"""
User (job seeker) registration and profile endpoints.
"""

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from jobify.core.database import get_db
from jobify.core.deps import get_current_principal, route_guard
from jobify.core.permissions import check_owner
from jobify.crud import principal as principal_crud
from jobify.models import PrincipalType, User
from jobify.schemas.auth import PasswordChangeRequest, TokenPayload
from jobify.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(route_guard)])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
def register_user(request: UserCreateRequest, db: Session = Depends(get_db)):
    """
    Register a new user account.

    Returns 409 if the email is already registered as a user.
    """
    return principal_crud.create(db, User, request.model_dump())


@router.get("/{user_id}", response_model=UserResponse)
def read_user(user_id: UUID, db: Session = Depends(get_db)):
    return principal_crud.get_or_404(db, User, user_id)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    principal: TokenPayload = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Update the caller's own profile."""
    check_owner(principal, PrincipalType.USER, user_id)
    return principal_crud.update(db, User, user_id, request.model_dump(exclude_unset=True, exclude_none=True))


@router.patch("/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT)
def change_user_password(
    user_id: UUID,
    request: PasswordChangeRequest,
    principal: TokenPayload = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Re-hash and store a new password. Tokens already issued stay valid."""
    check_owner(principal, PrincipalType.USER, user_id)
    principal_crud.update_password(db, User, user_id, request.new_password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}")
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    """Delete a user account. Jobs, applications and saved jobs are not touched."""
    principal_crud.delete(db, User, user_id)
    return {"message": "User deleted successfully"}
