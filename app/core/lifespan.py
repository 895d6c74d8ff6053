from contextlib import asynccontextmanager
import logging

from app.core.catalog import get_catalog
from app.core.guest_store import init_guest_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    catalog = get_catalog()
    init_guest_store()
    logger.info(
        "startup_ready padding_pool=%s keyword_rules=%s",
        len(catalog.get("padding_pool") or []),
        len(catalog.get("keyword_rules") or []),
    )
    yield
