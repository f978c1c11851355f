from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from football_team.models import FootballTeam
from football_team.services.football_team import (
    FootballTeamNotFoundError,
    FootballTeamService,
)


def make_football_team_router(football_team_service: FootballTeamService) -> APIRouter:
    router = APIRouter(prefix="/football-team", tags=["football-team"])

    @router.post(
        "",
        response_class=PlainTextResponse,
        status_code=status.HTTP_200_OK,
        summary="Add a football team",
    )
    async def add_football_team(team: FootballTeam):
        return await football_team_service.add(team)

    @router.get(
        "",
        response_model=list[FootballTeam],
        summary="List all football teams",
    )
    async def list_football_teams():
        return await football_team_service.list()

    @router.get(
        "/{team_name:path}",
        response_model=FootballTeam,
        summary="Get a football team by its exact name",
    )
    async def get_football_team(team_name: str):
        try:
            return await football_team_service.get(team_name)
        except FootballTeamNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return router
