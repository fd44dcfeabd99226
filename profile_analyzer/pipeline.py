"""Per-request pipeline: URL -> rendered HTML -> ProfileRecord -> AnalysisResult."""

import logging

from profile_analyzer.analysis import AnalysisResult, analyze_profile
from profile_analyzer.analysis.llm_client import create_client
from profile_analyzer.config import AppConfig
from profile_analyzer.profile.extractor import ensure_complete, extract_profile
from profile_analyzer.profile.fetcher import fetch_profile_html, validate_profile_url

logger = logging.getLogger("profile_analyzer.pipeline")


async def analyze_profile_url(profile_url: str, config: AppConfig) -> AnalysisResult:
    """Run the full analysis for one profile URL.

    Input and configuration problems are reported before the browser starts.
    The model client is released when the run ends, whatever the outcome.
    """
    url = validate_profile_url(profile_url, config.fetcher.allowed_domain)
    client = create_client(config.analyzer)
    try:
        logger.info("Step 1: Fetching profile page %s", url)
        html = await fetch_profile_html(url, config.fetcher)

        return await _analyze(html, config, client)
    finally:
        await client.close()


async def analyze_profile_html(html: str, config: AppConfig) -> AnalysisResult:
    """Run extraction and analysis over an already-saved HTML snapshot."""
    client = create_client(config.analyzer)
    try:
        return await _analyze(html, config, client)
    finally:
        await client.close()


async def _analyze(html: str, config: AppConfig, client) -> AnalysisResult:
    logger.info("Step 2: Extracting profile data (%d chars of HTML)", len(html))
    record = ensure_complete(extract_profile(html))

    logger.info("Step 3: Analyzing profile '%s'", record.basic_info.name)
    return await analyze_profile(record, config.analyzer, client=client)
