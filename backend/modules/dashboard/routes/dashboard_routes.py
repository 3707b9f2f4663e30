# backend/modules/dashboard/routes/dashboard_routes.py

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db

from ..schemas import InstituteStanding, MatchCard
from ..services import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/standings", response_model=List[InstituteStanding])
def get_standings(db: Session = Depends(get_db)):
    return DashboardService(db).get_standings()


@router.get("/recent-results", response_model=List[MatchCard])
def get_recent_results(
    limit: int = Query(5, ge=1, le=50), db: Session = Depends(get_db)
):
    return DashboardService(db).get_recent_results(limit)


@router.get("/upcoming-matches", response_model=List[MatchCard])
def get_upcoming_matches(
    limit: int = Query(5, ge=1, le=50), db: Session = Depends(get_db)
):
    return DashboardService(db).get_upcoming_matches(limit)
