# app/core/logging.py

import logging

import structlog

from app.core.configuration import settings

def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    structlog 설정 (app 시작 시 한 번 호출)
    """
    level = level or settings.LOG_LEVEL
    json_logs = settings.LOG_JSON if json_logs is None else json_logs

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )
