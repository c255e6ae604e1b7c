from typing import List, Any
from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.database import get_db
from app.core.auth import get_current_user
from app.db.models import User
from app.schemas.case import CaseCreate, CaseSummary, CaseDetail
from app.services.case_service import CaseService, CaseValidationError, TemplateInstantiationError

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[CaseSummary])
async def get_cases(
    *,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Retrieve the caller's cases, newest first.

    No pagination or server-side filtering; the case list filters the full
    result set on the client.
    """
    logger.info(f"Case list requested by user: {current_user.id}")

    cases = await CaseService(db).list_cases(current_user)

    logger.info(f"Retrieved {len(cases)} cases")
    return cases

@router.post("", response_model=CaseSummary)
async def create_case(
    *,
    db: AsyncSession = Depends(get_db),
    case_in: CaseCreate,
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Create new case owned by the caller.

    When a template is selected its task list is copied onto the case.
    """
    logger.info(f"Case creation requested by user: {current_user.id}")

    try:
        new_case = await CaseService(db).create_case(case_in, current_user)
    except CaseValidationError as e:
        logger.warning(f"Rejected case creation by user {current_user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except TemplateInstantiationError as e:
        logger.error(f"Failed to create template tasks for case {e.case_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    logger.info(f"Case created successfully: {new_case.id}")
    return new_case

@router.get("/{case_id}", response_model=CaseDetail)
async def read_case(
    *,
    db: AsyncSession = Depends(get_db),
    case_id: str = Path(..., description="The ID of the case to retrieve"),
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Get case by ID.

    Another lawyer's case answers exactly like a missing one.
    """
    logger.info(f"Case {case_id} requested by user: {current_user.id}")

    case = await CaseService(db).get_case(case_id, current_user)
    if not case:
        logger.warning(f"Case not found: {case_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Case not found"
        )

    return case
