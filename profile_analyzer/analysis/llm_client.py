"""OpenAI chat-completions wrapper for profile analysis."""

import logging

import openai
from openai import AsyncOpenAI

from profile_analyzer.analysis.prompt_builder import SYSTEM_PROMPT
from profile_analyzer.config import AnalyzerConfig
from profile_analyzer.errors import (
    AnalysisParseFailed,
    AnalysisTimeout,
    ConfigurationError,
    UpstreamUnavailable,
)

logger = logging.getLogger("profile_analyzer.analysis.llm")


def create_client(config: AnalyzerConfig) -> AsyncOpenAI:
    if not config.api_key:
        raise ConfigurationError("OpenAI API key is not configured (set OPENAI_API_KEY)")
    return AsyncOpenAI(api_key=config.api_key)


async def request_analysis(
    prompt: str,
    config: AnalyzerConfig,
    client: AsyncOpenAI | None = None,
) -> str:
    """Send the analysis prompt and return the model's raw text reply."""
    if client is None:
        client = create_client(config)

    try:
        response = await client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    except openai.APITimeoutError as e:
        logger.error("OpenAI request timed out: %s", e)
        raise AnalysisTimeout(f"OpenAI request timed out: {e}") from e
    except openai.APIError as e:
        logger.error("OpenAI API error: %s", e)
        raise UpstreamUnavailable(f"OpenAI API error: {e}") from e

    content = response.choices[0].message.content if response.choices else None
    if not content or not content.strip():
        raise AnalysisParseFailed("Empty response from OpenAI")

    logger.debug("Received %d chars from %s", len(content), config.model)
    return content.strip()
