"""Exception hierarchy for the analysis pipeline.

Each error carries the HTTP status it maps to and a sanitized message that is
safe to show to the caller. The exception text itself may contain internal
details and is only ever logged.
"""


class ProfileAnalyzerError(Exception):
    status_code = 500
    public_message = "Failed to analyze profile"


class InvalidInput(ProfileAnalyzerError):
    status_code = 400
    public_message = "Invalid Upwork profile URL"


class UpstreamUnavailable(ProfileAnalyzerError):
    public_message = "Profile page could not be loaded"


class FetchTimeout(UpstreamUnavailable):
    status_code = 504
    public_message = "Profile loading timed out. Please try again."


class ContentNotFound(UpstreamUnavailable):
    public_message = "Profile content not found on the page"


class MalformedResponse(UpstreamUnavailable):
    public_message = "Profile page returned incomplete content"


class ExtractionFailed(ProfileAnalyzerError):
    public_message = "Failed to read profile data from the page"


class IncompleteProfile(ExtractionFailed):
    public_message = "Failed to extract essential profile data"


class ConfigurationError(ProfileAnalyzerError):
    public_message = "Analysis service is not configured"


class AnalysisTimeout(ProfileAnalyzerError):
    status_code = 504
    public_message = "Profile analysis timed out. Please try again."


class AnalysisParseFailed(ProfileAnalyzerError):
    public_message = "Failed to parse analysis result"


class EmptyAnalysis(ProfileAnalyzerError):
    public_message = "Analysis lacks meaningful content. Please try again."


def classify_error(exc: Exception) -> tuple[int, str]:
    """Return (status_code, public_message) for any exception."""
    if isinstance(exc, ProfileAnalyzerError):
        return exc.status_code, exc.public_message
    if isinstance(exc, TimeoutError):
        return 504, FetchTimeout.public_message
    return ProfileAnalyzerError.status_code, ProfileAnalyzerError.public_message
