"""Recovery and normalization of the model's JSON reply.

The reply is untrusted: it may be wrapped in code fences or prose, and any
field may be missing or of the wrong type. ``validate_analysis`` rebuilds
every field explicitly, so the result always has the full shape.
"""

import json
import logging

from profile_analyzer.analysis.models import (
    AnalysisResult,
    BioAnalysis,
    HighPriorityItem,
    HourlyRate,
    ImprovementSuggestions,
    Improvements,
    LongTermPlan,
    ProfileOverview,
    QuickWin,
    Suggestion,
)
from profile_analyzer.errors import AnalysisParseFailed, EmptyAnalysis
from profile_analyzer.profile.models import ProfileRecord
from profile_analyzer.utils.text_processing import (
    parse_percentage,
    parse_rate,
    to_number,
    word_count,
)

logger = logging.getLogger("profile_analyzer.analysis.validation")


def extract_json_payload(text: str) -> dict:
    """Parse the JSON object between the first '{' and the last '}'."""
    start = text.find("{") if text else -1
    end = text.rfind("}") if text else -1
    if start == -1 or end < start:
        logger.error("No JSON object in model response:\n%s", text)
        raise AnalysisParseFailed("Model response contains no JSON object")

    candidate = text[start:end + 1]
    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse model response as JSON: %s\n%s", e, text)
        raise AnalysisParseFailed(f"Invalid JSON in model response: {e}") from e

    if not isinstance(payload, dict):
        logger.error("Model response JSON is not an object:\n%s", text)
        raise AnalysisParseFailed("Model response JSON is not an object")

    return payload


def validate_analysis(payload: dict, record: ProfileRecord) -> AnalysisResult:
    """Rebuild an AnalysisResult from untrusted model output.

    ``current_bio``, ``word_count``, ``job_success_score`` and the current
    hourly rate always come from the extracted profile, never from the model.
    """
    overview = _as_dict(payload.get("profile_overview"))
    rate = _as_dict(overview.get("hourly_rate"))
    bio = _as_dict(payload.get("bio_analysis"))
    suggestions = _as_dict(bio.get("improvement_suggestions"))
    improvements = _as_dict(payload.get("improvements"))
    long_term = _as_dict(improvements.get("long_term"))

    return AnalysisResult(
        profile_overview=ProfileOverview(
            score=_as_score(overview.get("score")),
            job_success_score=parse_percentage(record.metrics.job_success_score),
            market_fit=_as_score(overview.get("market_fit")),
            hourly_rate=HourlyRate(
                current=parse_rate(record.metrics.hourly_rate),
                recommended=_as_str(rate.get("recommended")) or "0-0",
                market_average=to_number(rate.get("market_average")),
            ),
        ),
        bio_analysis=BioAnalysis(
            current_bio=record.basic_info.bio,
            word_count=word_count(record.basic_info.bio),
            recommended_length=_as_str(bio.get("recommended_length")),
            score=_as_score(bio.get("score")),
            strengths=_as_str_list(bio.get("strengths")),
            weaknesses=_as_str_list(bio.get("weaknesses")),
            improvement_suggestions=ImprovementSuggestions(
                opening_hook=_as_suggestion(suggestions.get("opening_hook")),
                value_proposition=_as_suggestion(suggestions.get("value_proposition")),
                expertise_highlight=_as_suggestion(suggestions.get("expertise_highlight")),
            ),
        ),
        improvements=Improvements(
            high_priority=[
                HighPriorityItem(
                    area=_as_str(item.get("area")),
                    current=_as_str(item.get("current")),
                    recommended=_as_str(item.get("recommended")),
                    impact=_as_str(item.get("impact")),
                )
                for item in _as_list(improvements.get("high_priority"))
                if isinstance(item, dict)
            ],
            quick_wins=[
                QuickWin(
                    title=_as_str(item.get("title")),
                    actions=_as_str_list(item.get("actions")),
                )
                for item in _as_list(improvements.get("quick_wins"))
                if isinstance(item, dict)
            ],
            long_term=LongTermPlan(
                days_30=_as_str_list(long_term.get("30_days")),
                days_60_90=_as_str_list(long_term.get("60_90_days")),
                days_90_plus=_as_str_list(long_term.get("90_plus_days")),
            ),
        ),
    )


def ensure_meaningful(result: AnalysisResult) -> AnalysisResult:
    if not result.is_meaningful:
        raise EmptyAnalysis(
            "Analysis lacks meaningful content: strengths=%d weaknesses=%d "
            "high_priority=%d quick_wins=%d 30_days=%d" % (
                len(result.bio_analysis.strengths),
                len(result.bio_analysis.weaknesses),
                len(result.improvements.high_priority),
                len(result.improvements.quick_wins),
                len(result.improvements.long_term.days_30),
            )
        )
    return result


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def _as_score(value):
    # Scores are on a 0-100 scale whatever the model sends.
    return max(0, min(100, to_number(value)))


def _as_str(value) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _as_str_list(value) -> list[str]:
    """Keep scalar entries as strings; drop nested objects and blanks."""
    items = [_as_str(item) for item in _as_list(value)]
    return [item for item in items if item]


def _as_suggestion(value) -> Suggestion:
    value = _as_dict(value)
    return Suggestion(
        current=_as_str(value.get("current")),
        recommended=_as_str(value.get("recommended")),
        reason=_as_str(value.get("reason")),
    )
