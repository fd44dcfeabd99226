"""Analysis routes - form page, form submit, and JSON API."""

import logging
import traceback

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from profile_analyzer.config import AppConfig
from profile_analyzer.errors import classify_error
from profile_analyzer.pipeline import analyze_profile_url

from .dependencies import get_config

logger = logging.getLogger("profile_analyzer.web.analyze")

router = APIRouter()

URL_REQUIRED = "Profile URL is required"


def _report_failure(error: Exception) -> tuple[int, str]:
    """Log the full failure and return the sanitized (status, message) pair."""
    status_code, message = classify_error(error)
    level = logging.WARNING if status_code < 500 else logging.ERROR
    logger.log(
        level,
        "Analysis error: %s [%s] -> %d\n%s",
        error, type(error).__name__, status_code,
        "".join(traceback.format_exception(type(error), error, error.__traceback__)),
    )
    return status_code, message


@router.get("/health")
def health(config: AppConfig = Depends(get_config)):
    return {
        "status": "ok",
        "llm_configured": bool(config.analyzer.api_key),
    }


@router.get("/")
def index(request: Request):
    return request.app.state.templates.TemplateResponse("index.html", {
        "request": request,
        "profile_url": "",
    })


@router.post("/analyze")
async def analyze_form(request: Request, config: AppConfig = Depends(get_config)):
    form = await request.form()
    profile_url = str(form.get("profile_url", "")).strip()

    if not profile_url:
        return request.app.state.templates.TemplateResponse("index.html", {
            "request": request,
            "profile_url": profile_url,
            "error": URL_REQUIRED,
        }, status_code=400)

    try:
        result = await analyze_profile_url(profile_url, config)
    except Exception as e:
        status_code, message = _report_failure(e)
        return request.app.state.templates.TemplateResponse("index.html", {
            "request": request,
            "profile_url": profile_url,
            "error": message,
        }, status_code=status_code)

    return request.app.state.templates.TemplateResponse("index.html", {
        "request": request,
        "profile_url": profile_url,
        "analysis": result.to_dict(),
    })


@router.post("/api/analyze-profile")
async def analyze_api(request: Request, config: AppConfig = Depends(get_config)):
    try:
        body = await request.json()
    except ValueError:
        body = None

    profile_url = body.get("profileUrl") if isinstance(body, dict) else None
    if not profile_url or not isinstance(profile_url, str):
        return JSONResponse({"success": False, "error": URL_REQUIRED}, status_code=400)

    try:
        result = await analyze_profile_url(profile_url, config)
    except Exception as e:
        status_code, message = _report_failure(e)
        return JSONResponse({"success": False, "error": message}, status_code=status_code)

    return JSONResponse({"success": True, "data": result.to_dict()})
