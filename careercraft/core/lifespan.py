from contextlib import asynccontextmanager
import logging

from careercraft.core.config import settings
from careercraft.history import SqliteKeyValueStore, get_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    storage = get_storage()
    if isinstance(storage, SqliteKeyValueStore):
        storage.init_db()
        logger.info("history_storage_ready path=%s", settings.history_db_path)
    yield
