# app/api/routers/contracts.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.core.security import get_current_user
from app.models.contract import ContractStatus
from app.models.user_auth import UserAuth
from app.schemas.contract import ContractCreate, ContractStatusUpdate, ContractWithProgress
from app.schemas.user_auth import SuccessResponse
from app.services.contract import contract_service

router = APIRouter(prefix="/contracts", tags=["Word to Self Contracts"])


@router.post(
    "",
    response_model=ContractWithProgress,
    status_code=status.HTTP_201_CREATED,
    summary="Create a contract"
)
def create_contract(
    contract_data: ContractCreate,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """New contracts start `active` with an integrity score of 100."""
    contract = contract_service.create_contract(db, contract_data, current_user)
    return contract_service.with_progress(contract)


@router.get("", response_model=List[ContractWithProgress], summary="List my contracts")
def list_contracts(
    status: Optional[ContractStatus] = None,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    contracts = contract_service.list_contracts(db, current_user, status=status)
    return [contract_service.with_progress(contract) for contract in contracts]


@router.get("/{contract_id}", response_model=ContractWithProgress, summary="Get a contract")
def get_contract(
    contract_id: UUID,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    contract = contract_service.get_contract(db, contract_id, current_user)
    return contract_service.with_progress(contract)


@router.patch(
    "/{contract_id}/status",
    response_model=ContractWithProgress,
    summary="Close a contract as completed or failed"
)
def update_contract_status(
    contract_id: UUID,
    status_data: ContractStatusUpdate,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    contract = contract_service.update_status(db, contract_id, status_data.status, current_user)
    return contract_service.with_progress(contract)


@router.delete("/{contract_id}", response_model=SuccessResponse, summary="Delete a contract")
def delete_contract(
    contract_id: UUID,
    current_user: UserAuth = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    contract_service.delete_contract(db, contract_id, current_user)
    return SuccessResponse(message="Contract deleted successfully")
