from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from workout_tracker.db import get_db
from workout_tracker.schemas.statistics import StatisticsRead
from workout_tracker.services.statistics import StatisticsService

router = APIRouter(prefix="/statistics", tags=["statistics"])

@router.get("", response_model=StatisticsRead)
def statistics(db: Session = Depends(get_db)):
    return StatisticsRead.from_overview(StatisticsService(db).overview())
