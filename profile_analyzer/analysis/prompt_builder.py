"""Prompt templates for the profile analysis call."""

import json

from profile_analyzer.profile.models import ProfileRecord

MAX_RECENT_JOBS = 5

SYSTEM_PROMPT = (
    "You are a profile analysis API that only outputs valid JSON. "
    "Never include explanatory text outside the JSON response."
)

OUTPUT_SHAPE = """{
  "profile_overview": {
    "score": <number 0-100>,
    "job_success_score": <number from metrics>,
    "market_fit": <number 0-100>,
    "hourly_rate": {
      "current": <number from metrics>,
      "recommended": "<string rate range>",
      "market_average": <number>
    }
  },
  "bio_analysis": {
    "current_bio": "<string>",
    "recommended_length": "<string word range>",
    "score": <number 0-100>,
    "strengths": ["<string>"],
    "weaknesses": ["<string>"],
    "improvement_suggestions": {
      "opening_hook": {"current": "<string>", "recommended": "<string>", "reason": "<string>"},
      "value_proposition": {"current": "<string>", "recommended": "<string>", "reason": "<string>"},
      "expertise_highlight": {"current": "<string>", "recommended": "<string>", "reason": "<string>"}
    }
  },
  "improvements": {
    "high_priority": [
      {"area": "<string>", "current": "<string>", "recommended": "<string>", "impact": "<string>"}
    ],
    "quick_wins": [
      {"title": "<string>", "actions": ["<string>"]}
    ],
    "long_term": {
      "30_days": ["<string>"],
      "60_90_days": ["<string>"],
      "90_plus_days": ["<string>"]
    }
  }
}"""


def build_profile_summary(record: ProfileRecord) -> dict:
    """Reduce a profile to the size-bounded subset sent to the model.

    Keeps the five headline metrics, every skill, the most recent jobs without
    feedback text, and portfolio titles only.
    """
    return {
        "title": record.basic_info.title,
        "bio": record.basic_info.bio,
        "location": record.basic_info.location,
        "metrics": {
            "hourlyRate": record.metrics.hourly_rate,
            "jobSuccessScore": record.metrics.job_success_score,
            "totalEarnings": record.metrics.total_earnings,
            "totalJobs": record.metrics.total_jobs,
            "totalHours": record.metrics.total_hours,
        },
        "skills": list(record.skills),
        "recentJobs": [
            {
                "title": job.title,
                "rating": job.rating.score if job.rating else None,
                "type": job.type,
                "amount": job.amount,
            }
            for job in record.completed_jobs[:MAX_RECENT_JOBS]
        ],
        "portfolio": [item.title for item in record.portfolio],
    }


def build_analysis_prompt(record: ProfileRecord) -> str:
    summary = json.dumps(build_profile_summary(record), indent=2, ensure_ascii=False)

    return f"""Analyze this Upwork profile data and provide a JSON response with recommendations.

Profile Summary:
{summary}

Return your analysis in this exact JSON structure:
{OUTPUT_SHAPE}

Provide analysis focusing on:
1. Profile strength and market positioning
2. Bio improvements and value proposition
3. Rate optimization based on skills and experience
4. High-impact improvements and quick wins
5. Long-term growth strategy

Every list must contain at least one entry.
Return ONLY valid JSON, no markdown, no code fences, no additional text."""
