"""Upwork profile HTML parsing into a ProfileRecord.

The selectors below match one specific version of the public profile markup.
When Upwork changes its HTML, fields quietly come back empty instead of
raising, so callers should check ``ensure_complete`` and ``is_sparse``.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag

from profile_analyzer.errors import ExtractionFailed, IncompleteProfile
from profile_analyzer.profile.models import (
    BasicInfo,
    Job,
    Metrics,
    PortfolioItem,
    ProfileRecord,
    Rating,
    Timeframe,
)
from profile_analyzer.utils.text_processing import clean_text, parse_float, parse_int

logger = logging.getLogger("profile_analyzer.profile.extractor")

NAME_SELECTOR = 'h2[itemprop="name"]'
TITLE_SELECTOR = ".air3-card-section h2"
LOCATION_SELECTOR = ".location"
BIO_SELECTOR = ".text-pre-line.break"
HOURLY_RATE_SELECTOR = "h3.h5.nowrap"
JOB_SUCCESS_SELECTOR = ".job-success-score"
STAT_SELECTOR = ".stat-amount"
RESPONSE_TIME_SELECTOR = 'p:-soup-contains("response time")'
SKILL_SELECTOR = ".skill-name"
JOB_SELECTOR = ".assignments-item"
PORTFOLIO_SELECTOR = ".portfolio-v2-shelf-thumbnail"

HOURLY_MARKER = "/hr"
DATE_SEPARATOR_RE = re.compile(r"\s*[-–]\s*")


def extract_profile(html: str) -> ProfileRecord:
    """Parse a rendered profile page. Pure function, no I/O."""
    if not html:
        raise ExtractionFailed("No HTML to extract profile data from")

    try:
        soup = BeautifulSoup(html, "lxml")
        record = ProfileRecord(
            basic_info=_parse_basic_info(soup),
            metrics=_parse_metrics(soup),
            skills=_parse_skills(soup),
            completed_jobs=[_parse_job(item) for item in soup.select(JOB_SELECTOR)],
            portfolio=[_parse_portfolio_item(item) for item in soup.select(PORTFOLIO_SELECTOR)],
            raw_html=html,
        )
    except Exception as e:
        raise ExtractionFailed(f"Failed to extract profile data: {e}") from e

    logger.info(
        "Extracted profile: %s (%d skills, %d jobs, %d portfolio items)",
        record.basic_info.name or "Unknown",
        len(record.skills),
        len(record.completed_jobs),
        len(record.portfolio),
    )
    return record


def ensure_complete(record: ProfileRecord) -> ProfileRecord:
    """Reject records missing the name or title; warn on otherwise empty ones."""
    missing = [
        label for label, value in (
            ("name", record.basic_info.name),
            ("title", record.basic_info.title),
        ) if not value
    ]
    if missing:
        raise IncompleteProfile(f"Profile is missing required fields: {', '.join(missing)}")

    if record.is_sparse:
        logger.warning(
            "Profile '%s' has no bio, metrics, skills, jobs or portfolio - page markup may have changed",
            record.basic_info.name,
        )
    return record


def _select_text(root: Tag, selector: str) -> str:
    """Concatenated, cleaned text of every element matching selector."""
    return clean_text(" ".join(el.get_text() for el in root.select(selector)))


def _select_first_text(root: Tag, selector: str) -> str:
    el = root.select_one(selector)
    return clean_text(el.get_text()) if el else ""


def _parse_basic_info(soup: BeautifulSoup) -> BasicInfo:
    return BasicInfo(
        name=_select_text(soup, NAME_SELECTOR),
        title=_select_first_text(soup, TITLE_SELECTOR),
        location=_select_text(soup, LOCATION_SELECTOR),
        bio=_select_text(soup, BIO_SELECTOR),
    )


def _parse_metrics(soup: BeautifulSoup) -> Metrics:
    stats = [clean_text(el.get_text()) for el in soup.select(STAT_SELECTOR)]

    def stat(index: int) -> str:
        return stats[index] if index < len(stats) else ""

    return Metrics(
        hourly_rate=_select_text(soup, HOURLY_RATE_SELECTOR),
        job_success_score=_select_text(soup, JOB_SUCCESS_SELECTOR),
        total_earnings=stat(0),
        total_jobs=parse_int(stat(1)) or 0,
        total_hours=parse_int(stat(2)) or 0,
        response_time=_select_text(soup, RESPONSE_TIME_SELECTOR),
    )


def _parse_skills(soup: BeautifulSoup) -> list[str]:
    skills = [clean_text(el.get_text()) for el in soup.select(SKILL_SELECTOR)]
    return [skill for skill in skills if skill]


def _parse_job(item: Tag) -> Job:
    rating = None
    rating_elem = item.select_one(".air3-rating strong")
    feedback = _select_text(item, ".feedback span")
    if rating_elem is not None or feedback:
        rating = Rating(
            score=parse_float(clean_text(rating_elem.get_text())) if rating_elem else None,
            feedback=feedback,
        )

    return Job(
        title=_select_text(item, "h5 a"),
        rating=rating,
        timeframe=parse_timeframe(_select_text(item, ".text-base-sm.text-stone")),
        amount=_select_first_text(item, ".text-light-on-inverse strong"),
        type="hourly" if item.select(f'span:-soup-contains("{HOURLY_MARKER}")') else "fixed",
        hours=_parse_job_hours(item),
    )


def _parse_job_hours(item: Tag) -> int | None:
    # The hour count sits in the element just before the "hours" label.
    label = item.select_one('.text-light-on-inverse span:-soup-contains("hours")')
    if label is None:
        return None
    count = label.find_previous_sibling()
    if count is None:
        return None
    return parse_int(clean_text(count.get_text())) or None


def parse_timeframe(text: str) -> Timeframe:
    """Split 'Jan 2023 - Mar 2023' into start/end, defaulting end to 'Present'."""
    parts = DATE_SEPARATOR_RE.split(text, maxsplit=1)
    start = clean_text(parts[0])
    end = clean_text(parts[1]) if len(parts) > 1 else ""
    return Timeframe(start=start, end=end or "Present")


def _parse_portfolio_item(item: Tag) -> PortfolioItem:
    image = item.select_one("img")
    return PortfolioItem(
        title=_select_text(item, "a"),
        image=image.get("src") if image is not None else None,
        description=_select_text(item, ".mt-3x"),
    )
