"""Analysis result data model."""

from dataclasses import dataclass, field


@dataclass
class HourlyRate:
    current: float = 0
    recommended: str = ""
    market_average: float = 0


@dataclass
class ProfileOverview:
    score: float = 0
    job_success_score: float = 0
    market_fit: float = 0
    hourly_rate: HourlyRate = field(default_factory=HourlyRate)


@dataclass
class Suggestion:
    current: str = ""
    recommended: str = ""
    reason: str = ""


@dataclass
class ImprovementSuggestions:
    opening_hook: Suggestion = field(default_factory=Suggestion)
    value_proposition: Suggestion = field(default_factory=Suggestion)
    expertise_highlight: Suggestion = field(default_factory=Suggestion)


@dataclass
class BioAnalysis:
    current_bio: str = ""
    word_count: int = 0
    recommended_length: str = ""
    score: float = 0
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    improvement_suggestions: ImprovementSuggestions = field(default_factory=ImprovementSuggestions)


@dataclass
class HighPriorityItem:
    area: str = ""
    current: str = ""
    recommended: str = ""
    impact: str = ""


@dataclass
class QuickWin:
    title: str = ""
    actions: list[str] = field(default_factory=list)


@dataclass
class LongTermPlan:
    days_30: list[str] = field(default_factory=list)
    days_60_90: list[str] = field(default_factory=list)
    days_90_plus: list[str] = field(default_factory=list)


@dataclass
class Improvements:
    high_priority: list[HighPriorityItem] = field(default_factory=list)
    quick_wins: list[QuickWin] = field(default_factory=list)
    long_term: LongTermPlan = field(default_factory=LongTermPlan)


@dataclass
class AnalysisResult:
    """Validated recommendations for one profile."""

    profile_overview: ProfileOverview = field(default_factory=ProfileOverview)
    bio_analysis: BioAnalysis = field(default_factory=BioAnalysis)
    improvements: Improvements = field(default_factory=Improvements)

    @property
    def is_meaningful(self) -> bool:
        """True when every key recommendation list has at least one entry."""
        return bool(
            self.bio_analysis.strengths
            and self.bio_analysis.weaknesses
            and self.improvements.high_priority
            and self.improvements.quick_wins
            and self.improvements.long_term.days_30
        )

    def to_dict(self) -> dict:
        """Convert to the JSON shape served to clients."""
        overview = self.profile_overview
        bio = self.bio_analysis
        suggestions = bio.improvement_suggestions
        improvements = self.improvements

        def suggestion(s: Suggestion) -> dict:
            return {"current": s.current, "recommended": s.recommended, "reason": s.reason}

        return {
            "profile_overview": {
                "score": overview.score,
                "job_success_score": overview.job_success_score,
                "market_fit": overview.market_fit,
                "hourly_rate": {
                    "current": overview.hourly_rate.current,
                    "recommended": overview.hourly_rate.recommended,
                    "market_average": overview.hourly_rate.market_average,
                },
            },
            "bio_analysis": {
                "current_bio": bio.current_bio,
                "word_count": bio.word_count,
                "recommended_length": bio.recommended_length,
                "score": bio.score,
                "strengths": list(bio.strengths),
                "weaknesses": list(bio.weaknesses),
                "improvement_suggestions": {
                    "opening_hook": suggestion(suggestions.opening_hook),
                    "value_proposition": suggestion(suggestions.value_proposition),
                    "expertise_highlight": suggestion(suggestions.expertise_highlight),
                },
            },
            "improvements": {
                "high_priority": [
                    {
                        "area": item.area,
                        "current": item.current,
                        "recommended": item.recommended,
                        "impact": item.impact,
                    }
                    for item in improvements.high_priority
                ],
                "quick_wins": [
                    {"title": win.title, "actions": list(win.actions)}
                    for win in improvements.quick_wins
                ],
                "long_term": {
                    "30_days": list(improvements.long_term.days_30),
                    "60_90_days": list(improvements.long_term.days_60_90),
                    "90_plus_days": list(improvements.long_term.days_90_plus),
                },
            },
        }
