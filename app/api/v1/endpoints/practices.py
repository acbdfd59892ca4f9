"""
Swimming practice endpoints.

Log a practice and list the full history, newest date first.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.swimming_practice import SwimmingPracticeCreate, SwimmingPracticeResponse
from app.services.swimming_practice_service import SwimmingPracticeService

router = APIRouter()


@router.post("", summary="Log a swimming practice.", response_model=SwimmingPracticeResponse,
             status_code=status.HTTP_201_CREATED, )
def create_practice(data: SwimmingPracticeCreate, db: Session = Depends(get_db), ):
    service = SwimmingPracticeService(db)
    return service.create_practice(data)


@router.get("", summary="List all swimming practices, most recent date first.",
            response_model=list[SwimmingPracticeResponse], )
def list_practices(db: Session = Depends(get_db), ):
    service = SwimmingPracticeService(db)
    return service.get_practices()
