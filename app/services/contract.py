# services/contract.py
import logging
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud.contract import crud_contract
from app.models.contract import WordToSelfContract, ContractStatus
from app.models.user_auth import UserAuth
from app.schemas.contract import ContractCreate, ContractRead, ContractWithProgress
from app.services import analysis

logger = logging.getLogger(__name__)


class ContractService:
    """Service layer for word-to-self contracts."""

    def __init__(self):
        self.crud = crud_contract

    def with_progress(
        self, contract: WordToSelfContract, now: Optional[datetime] = None
    ) -> ContractWithProgress:
        contract_data = ContractRead.model_validate(contract).model_dump()
        return ContractWithProgress(
            **contract_data,
            completion=analysis.contract_completion(contract, now),
        )

    def create_contract(
        self, db: Session, contract_data: ContractCreate, requesting_user: UserAuth
    ) -> WordToSelfContract:
        contract = self.crud.create(db, obj_in=contract_data, user_id=requesting_user.id)
        logger.info("Created contract %s for user %s", contract.id, requesting_user.id)
        return contract

    def get_contract(
        self, db: Session, contract_id: UUID, requesting_user: UserAuth
    ) -> WordToSelfContract:
        contract = self.crud.get_for_user(db, id=contract_id, user_id=requesting_user.id)
        if not contract:
            raise NotFoundError("Contract not found")
        return contract

    def list_contracts(
        self,
        db: Session,
        requesting_user: UserAuth,
        status: Optional[ContractStatus] = None,
    ) -> List[WordToSelfContract]:
        return self.crud.get_multi_by_user(db, user_id=requesting_user.id, status=status)

    def update_status(
        self,
        db: Session,
        contract_id: UUID,
        new_status: ContractStatus,
        requesting_user: UserAuth,
    ) -> WordToSelfContract:
        """
        Close an active contract as completed or failed.

        Raises:
            ValidationError: If the target status is not terminal
            ConflictError: If the contract is already closed
        """
        if new_status == ContractStatus.active:
            raise ValidationError("A contract can only move to completed or failed")

        contract = self.get_contract(db, contract_id, requesting_user)
        if contract.status != ContractStatus.active:
            raise ConflictError(f"Contract is already {contract.status.value}")

        contract = self.crud.update_status(db, db_obj=contract, status=new_status)
        logger.info("Contract %s marked %s", contract.id, new_status.value)
        return contract

    def delete_contract(
        self, db: Session, contract_id: UUID, requesting_user: UserAuth
    ) -> WordToSelfContract:
        contract = self.get_contract(db, contract_id, requesting_user)
        return self.crud.delete(db, db_obj=contract)


contract_service = ContractService()
