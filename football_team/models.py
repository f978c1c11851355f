from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FootballTeam(BaseModel):
    """Football team record passed across the HTTP boundary.

    Fields travel under camelCase aliases. ``currentSuperBowlChampion``
    accepts the legacy integer encoding (0/1) as well as JSON booleans and
    is always emitted as a boolean.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    team_name: str = Field(
        ...,
        alias="teamName",
        min_length=1,
        description="Team name, used as the lookup key",
        examples=["Dallas-Cowboys"],
    )
    wins: int = Field(..., description="Number of wins", examples=[7])
    losses: int = Field(..., description="Number of losses", examples=[3])
    current_super_bowl_champion: bool = Field(
        ...,
        alias="currentSuperBowlChampion",
        description="Whether the team holds the current Super Bowl title (0/1 accepted)",
        examples=[False],
    )

    @field_validator("current_super_bowl_champion", mode="before")
    @classmethod
    def decode_champion_flag(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            if v not in (0, 1):
                raise ValueError("currentSuperBowlChampion must be 0 or 1")
            return bool(v)
        return v
