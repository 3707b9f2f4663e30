# backend/modules/teams/routes/team_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

from ..schemas import TeamCreate, TeamDetail, TeamMemberAdd, TeamOut, TeamRename
from ..services import TeamService

router = APIRouter(prefix="/api/teams", tags=["Teams"])


@router.get("/", response_model=List[TeamOut])
def list_teams(
    event_id: Optional[int] = Query(None, alias="eventId"),
    db: Session = Depends(get_db),
):
    return TeamService(db).list_teams(event_id)


@router.get("/{team_id}", response_model=TeamDetail)
def get_team(team_id: int, db: Session = Depends(get_db)):
    """Team with its roster"""
    return TeamService(db).get_team_detail(team_id)


@router.post("/", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_team(team_data: TeamCreate, db: Session = Depends(get_db)):
    team = TeamService(db).create_team(team_data)
    return CreatedResponse(id=team.id, message=f"Team {team.team_name} created successfully.")


@router.put("/{team_id}", response_model=MessageResponse)
def rename_team(team_id: int, rename_data: TeamRename, db: Session = Depends(get_db)):
    TeamService(db).rename_team(team_id, rename_data)
    return MessageResponse(message=f"Team {team_id} updated successfully.")


@router.delete("/{team_id}", response_model=MessageResponse)
def delete_team(team_id: int, db: Session = Depends(get_db)):
    TeamService(db).delete_team(team_id)
    return MessageResponse(message=f"Team {team_id} deleted successfully.")


@router.post(
    "/{team_id}/members", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
def add_team_member(team_id: int, member_data: TeamMemberAdd, db: Session = Depends(get_db)):
    member = TeamService(db).add_member(team_id, member_data)
    return CreatedResponse(
        id=member.id,
        message=f"Participant {member.participant_id} added to team {team_id}.",
    )


@router.delete("/{team_id}/members/{participant_id}", response_model=MessageResponse)
def remove_team_member(team_id: int, participant_id: int, db: Session = Depends(get_db)):
    TeamService(db).remove_member(team_id, participant_id)
    return MessageResponse(message=f"Participant {participant_id} removed from team {team_id}.")
