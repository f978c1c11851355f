import asyncio
import logging
from typing import List, Optional

from football_team.models import FootballTeam

log: logging.Logger = logging.getLogger(__name__)


class FootballTeamRepository:
    def __init__(self) -> None:
        self.teams: List[FootballTeam] = []
        self.lock: asyncio.Lock = asyncio.Lock()

    async def add(self, team: FootballTeam) -> None:
        async with self.lock:
            self.teams.append(team)
            log.info(
                f"Football team {team.team_name} stored, total: {len(self.teams)}"
            )

    async def get_by_name(self, team_name: str) -> Optional[FootballTeam]:
        async with self.lock:
            for team in self.teams:
                if team.team_name == team_name:
                    log.info(f"Found football team with name: {team_name}")
                    return team
        log.info(f"Football team with name {team_name} not found")
        return None

    async def list(self) -> List[FootballTeam]:
        async with self.lock:
            return list(self.teams)

    async def count(self) -> int:
        async with self.lock:
            return len(self.teams)


def make_football_team_repository() -> FootballTeamRepository:
    return FootballTeamRepository()
