"""
Company registration and profile endpoints.
"""

import logging
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from jobify.core.database import get_db
from jobify.core.deps import get_current_principal, route_guard
from jobify.core.permissions import check_owner
from jobify.crud import principal as principal_crud
from jobify.models import Company, PrincipalType
from jobify.schemas.auth import PasswordChangeRequest, TokenPayload
from jobify.schemas.company import CompanyCreateRequest, CompanyResponse, CompanyUpdateRequest

router = APIRouter(prefix="/companies", tags=["Companies"], dependencies=[Depends(route_guard)])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CompanyResponse)
def register_company(request: CompanyCreateRequest, db: Session = Depends(get_db)):
    """
    Register a new company account.

    Returns 409 if the email is already registered as a company.
    """
    return principal_crud.create(db, Company, request.model_dump())


@router.get("/{company_id}", response_model=CompanyResponse)
def read_company(company_id: UUID, db: Session = Depends(get_db)):
    return principal_crud.get_or_404(db, Company, company_id)


@router.patch("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: UUID,
    request: CompanyUpdateRequest,
    principal: TokenPayload = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    check_owner(principal, PrincipalType.COMPANY, company_id)
    return principal_crud.update(db, Company, company_id, request.model_dump(exclude_unset=True, exclude_none=True))


@router.patch("/{company_id}/password", status_code=status.HTTP_204_NO_CONTENT)
def change_company_password(
    company_id: UUID,
    request: PasswordChangeRequest,
    principal: TokenPayload = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    check_owner(principal, PrincipalType.COMPANY, company_id)
    principal_crud.update_password(db, Company, company_id, request.new_password)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{company_id}")
def delete_company(company_id: UUID, db: Session = Depends(get_db)):
    """Delete a company account. Its job posts are left in place."""
    principal_crud.delete(db, Company, company_id)
    return {"message": "Company deleted successfully"}
