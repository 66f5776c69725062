from typing import Optional

from pydantic import BaseModel, Field


class StatsSummaryResponse(BaseModel):
    """Public JSON shape of GET /stats/{username}."""
    username: str
    totalSolved: int = Field(ge=0)
    ranking: Optional[int] = Field(default=None, description="Global ranking, null when upstream omits it")
    solvedLastDay: int = Field(ge=0)
    solvedLastWeek: int = Field(ge=0)
    solvedLastMonth: int = Field(ge=0)


class ErrorResponse(BaseModel):
    error: str
