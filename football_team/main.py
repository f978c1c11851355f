import uvicorn
from fastapi import FastAPI

from football_team.config import API_PREFIX, APP_HOST, APP_PORT, TITLE
from football_team.middlewares.logging import LoggingMiddleware
from football_team.repositories.football_team import make_football_team_repository
from football_team.routers.football_team import make_football_team_router
from football_team.services.football_team import (
    FootballTeamService,
    make_football_team_service,
)


def make_app(football_team_service: FootballTeamService) -> FastAPI:
    app = FastAPI(title=TITLE)
    app.add_middleware(LoggingMiddleware)

    app.include_router(
        make_football_team_router(football_team_service), prefix=API_PREFIX
    )

    @app.get("/health")
    async def health():
        return {"status": "ok", "teams": await football_team_service.count()}

    return app


app = make_app(make_football_team_service(make_football_team_repository()))


if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, reload=False)
