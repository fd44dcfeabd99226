"""Profile data model."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class BasicInfo:
    name: str = ""
    title: str = ""
    location: str = ""
    bio: str = ""


@dataclass
class Metrics:
    hourly_rate: str = ""
    job_success_score: str = ""
    total_earnings: str = ""
    total_jobs: int = 0
    total_hours: int = 0
    response_time: str = ""


@dataclass
class Rating:
    score: Optional[float] = None
    feedback: str = ""


@dataclass
class Timeframe:
    start: str = ""
    end: str = "Present"


@dataclass
class Job:
    """A completed job from the profile's work history."""

    title: str
    amount: str = ""
    type: str = "fixed"  # "hourly" or "fixed"
    timeframe: Timeframe = field(default_factory=Timeframe)
    rating: Optional[Rating] = None
    hours: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "rating": (
                {"score": self.rating.score, "feedback": self.rating.feedback}
                if self.rating else None
            ),
            "timeframe": {"start": self.timeframe.start, "end": self.timeframe.end},
            "amount": self.amount,
            "type": self.type,
            "hours": self.hours,
        }


@dataclass
class PortfolioItem:
    title: str
    image: Optional[str] = None
    description: str = ""

    def to_dict(self) -> dict:
        return {"title": self.title, "image": self.image, "description": self.description}


@dataclass
class ProfileRecord:
    """Represents a marketplace profile page after parsing.

    Built fresh from one HTML snapshot per request; ``raw_html`` is kept for
    diagnostics only and is left out of ``to_dict``.
    """

    basic_info: BasicInfo = field(default_factory=BasicInfo)
    metrics: Metrics = field(default_factory=Metrics)
    skills: list[str] = field(default_factory=list)
    completed_jobs: list[Job] = field(default_factory=list)
    portfolio: list[PortfolioItem] = field(default_factory=list)
    raw_html: str = field(default="", repr=False)

    @property
    def is_sparse(self) -> bool:
        """True when nothing beyond name/title was found (likely a markup change)."""
        m = self.metrics
        return not (
            self.basic_info.bio
            or m.hourly_rate or m.job_success_score or m.total_earnings
            or m.total_jobs or m.total_hours
            or self.skills or self.completed_jobs or self.portfolio
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "basic_info": {
                "name": self.basic_info.name,
                "title": self.basic_info.title,
                "location": self.basic_info.location,
                "bio": self.basic_info.bio,
            },
            "metrics": {
                "hourly_rate": self.metrics.hourly_rate,
                "job_success_score": self.metrics.job_success_score,
                "total_earnings": self.metrics.total_earnings,
                "total_jobs": self.metrics.total_jobs,
                "total_hours": self.metrics.total_hours,
                "response_time": self.metrics.response_time,
            },
            "skills": list(self.skills),
            "completed_jobs": [job.to_dict() for job in self.completed_jobs],
            "portfolio": [item.to_dict() for item in self.portfolio],
        }
