"""Uvicorn entry point for the QuickNotes API."""

import copy
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from quicknotes.app import App
from quicknotes.config import Config
from quicknotes.web.server import create_fastapi_app

ACCESS_LOG_FORMAT = '%(asctime)s - "%(request_line)s" %(status_code)s'
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def build_log_config() -> dict[str, Any]:
    """Uvicorn's logging config with shorter line formats. Uvicorn's own default stays untouched."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = ACCESS_LOG_FORMAT
    log_config["formatters"]["default"]["fmt"] = DEFAULT_LOG_FORMAT
    return log_config


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)
    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=build_log_config(),
        log_level="debug" if config.debug else "info",
        access_log=True,
    )
