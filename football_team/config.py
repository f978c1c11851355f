import os

from dotenv import load_dotenv

load_dotenv()

TITLE: str = os.environ.get("FOOTBALL_TEAM_APP_TITLE", "Football Team Service")
API_PREFIX: str = os.environ.get("FOOTBALL_TEAM_API_PREFIX", "")
APP_HOST: str = os.environ.get("FOOTBALL_TEAM_APP_HOST", "0.0.0.0")
APP_PORT: int = int(os.environ.get("FOOTBALL_TEAM_APP_PORT", 8000))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
