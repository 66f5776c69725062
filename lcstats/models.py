# lcstats/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ACCEPTED = "Accepted"


@dataclass(frozen=True)
class SubmissionRecord:
    title: str
    title_slug: str
    timestamp: str
    status_display: str
    lang: str

    @classmethod
    def from_graphql(cls, raw: Dict[str, Any]) -> "SubmissionRecord":
        return cls(
            title=raw.get("title") or "",
            title_slug=raw.get("titleSlug") or "",
            timestamp=str(raw.get("timestamp") or ""),
            status_display=raw.get("statusDisplay") or "",
            lang=raw.get("lang") or "",
        )

    @property
    def accepted(self) -> bool:
        return self.status_display == ACCEPTED


@dataclass(frozen=True)
class DifficultyCount:
    difficulty: str
    count: int
    submissions: int = 0


@dataclass(frozen=True)
class UserProfile:
    username: str
    ranking: Optional[int]
    accepted_counts: List[DifficultyCount] = field(default_factory=list)
    all_questions_count: List[DifficultyCount] = field(default_factory=list)


@dataclass(frozen=True)
class WindowCounts:
    daily: int = 0
    weekly: int = 0
    monthly: int = 0


@dataclass(frozen=True)
class StatsSummary:
    username: str
    total_solved: int
    ranking: Optional[int]
    solved_last_day: int
    solved_last_week: int
    solved_last_month: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "totalSolved": self.total_solved,
            "ranking": self.ranking,
            "solvedLastDay": self.solved_last_day,
            "solvedLastWeek": self.solved_last_week,
            "solvedLastMonth": self.solved_last_month,
        }
