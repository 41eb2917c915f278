from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from quicknotes.config import Config
from quicknotes.core.modules.note.store import NoteStore

logger = structlog.get_logger(__name__)


class App:
    """Application container owning the configuration and the note store."""

    def __init__(self, config: Config, store: NoteStore | None = None) -> None:
        self.config = config
        self.store = store if store is not None else NoteStore()

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management."""
        logger.info("app_started", host=self.config.host, port=self.config.port)
        try:
            yield
        finally:
            logger.info("app_stopped", notes=self.store.count())
