"""Profile analysis with a hosted language model."""

from .analyzer import analyze_profile
from .models import AnalysisResult
from .prompt_builder import build_analysis_prompt, build_profile_summary
from .validation import ensure_meaningful, extract_json_payload, validate_analysis

__all__ = [
    "analyze_profile",
    "AnalysisResult",
    "build_analysis_prompt",
    "build_profile_summary",
    "ensure_meaningful",
    "extract_json_payload",
    "validate_analysis",
]
