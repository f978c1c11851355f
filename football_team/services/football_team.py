import logging
from typing import List

from football_team.models import FootballTeam
from football_team.repositories.football_team import FootballTeamRepository

log: logging.Logger = logging.getLogger(__name__)


class FootballTeamNotFoundError(Exception):
    def __init__(self, team_name: str):
        super().__init__(f"Football team {team_name} not found")
        self.team_name = team_name


class FootballTeamService:
    def __init__(self, football_team_repository: FootballTeamRepository):
        self.football_team_repository = football_team_repository

    async def add(self, team: FootballTeam) -> str:
        # duplicates are kept; lookups return the first one added
        await self.football_team_repository.add(team)
        return f"Football team {team.team_name} added"

    async def get(self, team_name: str) -> FootballTeam:
        team = await self.football_team_repository.get_by_name(team_name)
        if team is None:
            log.warning(f"Lookup miss for football team {team_name}")
            raise FootballTeamNotFoundError(team_name)
        return team

    async def list(self) -> List[FootballTeam]:
        return await self.football_team_repository.list()

    async def count(self) -> int:
        return await self.football_team_repository.count()


def make_football_team_service(
    football_team_repository: FootballTeamRepository,
) -> FootballTeamService:
    return FootballTeamService(football_team_repository=football_team_repository)
