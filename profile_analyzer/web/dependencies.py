"""Shared FastAPI dependencies."""

from fastapi import Request

from profile_analyzer.config import AppConfig


def get_config(request: Request) -> AppConfig:
    return request.app.state.config
