"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class FetcherConfig:
    allowed_domain: str = "upwork.com"
    user_agent: str = DEFAULT_USER_AGENT
    viewport_width: int = 1920
    viewport_height: int = 1080
    launch_attempts: int = 3
    launch_retry_delay: float = 1.0
    navigation_timeout_ms: int = 60000
    fallback_timeout_ms: int = 30000
    selector_timeout_ms: int = 10000
    selector_attempts: int = 3
    selector_retry_delay: float = 2.0
    min_html_length: int = 1000


@dataclass
class AnalyzerConfig:
    api_key: str = ""
    model: str = "gpt-4o"
    max_tokens: int = 4096
    temperature: float = 0.5


@dataclass
class AppConfig:
    fetcher: FetcherConfig = field(default_factory=FetcherConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load configuration from a YAML file, or defaults when no path is given.

    Environment variables take precedence over file values for the API key
    and the model name.
    """
    raw = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                "Copy config.example.yaml to config.yaml and fill in your settings."
            )
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    defaults = FetcherConfig()
    fetcher_raw = raw.get("fetcher", {}) or {}
    fetcher = FetcherConfig(
        allowed_domain=fetcher_raw.get("allowed_domain", defaults.allowed_domain),
        user_agent=fetcher_raw.get("user_agent", defaults.user_agent),
        viewport_width=fetcher_raw.get("viewport_width", defaults.viewport_width),
        viewport_height=fetcher_raw.get("viewport_height", defaults.viewport_height),
        launch_attempts=fetcher_raw.get("launch_attempts", defaults.launch_attempts),
        launch_retry_delay=fetcher_raw.get("launch_retry_delay", defaults.launch_retry_delay),
        navigation_timeout_ms=fetcher_raw.get("navigation_timeout_ms", defaults.navigation_timeout_ms),
        fallback_timeout_ms=fetcher_raw.get("fallback_timeout_ms", defaults.fallback_timeout_ms),
        selector_timeout_ms=fetcher_raw.get("selector_timeout_ms", defaults.selector_timeout_ms),
        selector_attempts=fetcher_raw.get("selector_attempts", defaults.selector_attempts),
        selector_retry_delay=fetcher_raw.get("selector_retry_delay", defaults.selector_retry_delay),
        min_html_length=fetcher_raw.get("min_html_length", defaults.min_html_length),
    )

    analyzer_raw = raw.get("analyzer", {}) or {}
    analyzer = AnalyzerConfig(
        api_key=os.environ.get("OPENAI_API_KEY", analyzer_raw.get("api_key", "")),
        model=os.environ.get("PROFILE_ANALYZER_MODEL", analyzer_raw.get("model", "gpt-4o")),
        max_tokens=analyzer_raw.get("max_tokens", 4096),
        temperature=analyzer_raw.get("temperature", 0.5),
    )

    return AppConfig(
        fetcher=fetcher,
        analyzer=analyzer,
        log_dir=raw.get("log_dir", "logs"),
        log_level=str(raw.get("log_level", "INFO")).upper(),
    )


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.analyzer.api_key:
        warnings.append("No OpenAI API key configured - profile analysis will fail")

    if not config.fetcher.allowed_domain:
        warnings.append("No allowed profile domain configured - every URL will be rejected")

    if config.fetcher.launch_attempts < 1 or config.fetcher.selector_attempts < 1:
        warnings.append("Retry attempts must be at least 1")

    if config.fetcher.navigation_timeout_ms <= 0 or config.fetcher.fallback_timeout_ms <= 0:
        warnings.append("Navigation timeouts must be positive")

    if not 0.0 <= config.analyzer.temperature <= 2.0:
        warnings.append("Analyzer temperature should be between 0.0 and 2.0")

    return warnings
