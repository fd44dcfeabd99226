"""Profile analysis: prompt, model call, and validation."""

import logging

from openai import AsyncOpenAI

from profile_analyzer.analysis.llm_client import create_client, request_analysis
from profile_analyzer.analysis.models import AnalysisResult
from profile_analyzer.analysis.prompt_builder import build_analysis_prompt
from profile_analyzer.analysis.validation import (
    ensure_meaningful,
    extract_json_payload,
    validate_analysis,
)
from profile_analyzer.config import AnalyzerConfig
from profile_analyzer.profile.models import ProfileRecord

logger = logging.getLogger("profile_analyzer.analysis")


async def analyze_profile(
    record: ProfileRecord,
    config: AnalyzerConfig,
    client: AsyncOpenAI | None = None,
) -> AnalysisResult:
    """Run the model over a profile summary and return a validated result.

    Raises ConfigurationError before building the prompt if no API key is set,
    AnalysisParseFailed if no JSON object can be recovered, and EmptyAnalysis
    if the normalized result is missing key recommendations. A client created
    here is closed before returning; a passed-in client is left open.
    """
    if client is None:
        client = create_client(config)
        try:
            return await analyze_profile(record, config, client=client)
        finally:
            await client.close()

    prompt = build_analysis_prompt(record)
    logger.info(
        "Requesting analysis for '%s' from %s (%d char prompt)",
        record.basic_info.name, config.model, len(prompt),
    )

    text = await request_analysis(prompt, config, client=client)
    payload = extract_json_payload(text)
    result = ensure_meaningful(validate_analysis(payload, record))

    logger.info(
        "Analysis complete for '%s': score=%s market_fit=%s (%d high-priority items)",
        record.basic_info.name,
        result.profile_overview.score,
        result.profile_overview.market_fit,
        len(result.improvements.high_priority),
    )
    return result
