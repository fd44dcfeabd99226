"""FastAPI application factory."""

import logging
import os
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from jinja2 import Environment, FileSystemLoader
from starlette.responses import HTMLResponse

from profile_analyzer.config import AppConfig, load_config, validate_config
from profile_analyzer.utils.logging_config import setup_logging

from .analyze import router as analyze_router

logger = logging.getLogger("profile_analyzer.web")

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"


def _create_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
    )


class _Templates:
    """Thin wrapper that mimics Jinja2Templates from starlette."""

    def __init__(self):
        self.env = _create_jinja_env()

    def TemplateResponse(self, name: str, context: dict, status_code: int = 200):
        template = self.env.get_template(name)
        html = template.render(**context)
        return HTMLResponse(html, status_code=status_code)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    if config is None:
        config = load_config(os.environ.get("PROFILE_ANALYZER_CONFIG"))

    setup_logging(config.log_dir, config.log_level)
    for warning in validate_config(config):
        logger.warning("Config: %s", warning)

    app = FastAPI(title="Upwork Profile Analyzer")
    app.state.config = config
    app.state.templates = _Templates()
    app.include_router(analyze_router)

    return app


app = create_app()
