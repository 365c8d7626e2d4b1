"""
Admin management endpoints.

Every route here requires an admin token: superadmin for account
management, superadmin or moderator for system statistics. See
ROUTE_POLICIES in jobify.core.permissions.
"""

import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jobify.core.database import get_db
from jobify.core.deps import route_guard
from jobify.crud import principal as principal_crud
from jobify.models import Admin, Company, User
from jobify.schemas.admin import AdminCreateRequest, AdminResponse, AdminUpdateRequest, SystemStatsResponse
from jobify.schemas.auth import PasswordChangeRequest

router = APIRouter(prefix="/admins", tags=["Admins"], dependencies=[Depends(route_guard)])
logger = logging.getLogger(__name__)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AdminResponse,
    responses={409: {"description": "Email already exists"}},
)
def create_admin(request: AdminCreateRequest, db: Session = Depends(get_db)):
    """Provision a new admin account."""
    return principal_crud.create(db, Admin, request.model_dump())


@router.get("", response_model=List[AdminResponse])
def list_admins(
    skip: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return principal_crud.get_multi(db, Admin, skip=skip, limit=limit)


# Declared before /{admin_id} so "system-stats" is not parsed as an id
@router.get("/system-stats", response_model=SystemStatsResponse)
def read_system_stats(db: Session = Depends(get_db)):
    """Get record counts for every principal type."""
    return SystemStatsResponse(
        total_users=principal_crud.count(db, User),
        total_companies=principal_crud.count(db, Company),
        total_admins=principal_crud.count(db, Admin),
    )


@router.get("/{admin_id}", response_model=AdminResponse, responses={404: {"description": "Admin not found"}})
def read_admin(admin_id: UUID, db: Session = Depends(get_db)):
    return principal_crud.get_or_404(db, Admin, admin_id)


@router.patch(
    "/{admin_id}",
    response_model=AdminResponse,
    responses={404: {"description": "Admin not found"}, 409: {"description": "Email already exists"}},
)
def update_admin(admin_id: UUID, request: AdminUpdateRequest, db: Session = Depends(get_db)):
    """
    Update an admin's profile or role.

    A role change only shows up in tokens issued by the next login; existing
    tokens (and their refreshes) keep the old role until they expire.
    """
    return principal_crud.update(db, Admin, admin_id, request.model_dump(exclude_unset=True, exclude_none=True))


@router.patch("/{admin_id}/password", status_code=status.HTTP_204_NO_CONTENT)
def change_admin_password(admin_id: UUID, request: PasswordChangeRequest, db: Session = Depends(get_db)):
    principal_crud.update_password(db, Admin, admin_id, request.new_password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{admin_id}", responses={404: {"description": "Admin not found"}})
def delete_admin(admin_id: UUID, db: Session = Depends(get_db)):
    principal_crud.delete(db, Admin, admin_id)
    logger.info(f"Admin {admin_id} deleted")
    return {"message": "Admin deleted successfully"}
