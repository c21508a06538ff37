from contextlib import asynccontextmanager
import logging

from app.core.config.scoring import scoring_config_path
from app.scoring import get_vocabulary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    vocabulary = get_vocabulary()
    logger.info(
        "scoring_config_loaded path=%s vocabulary_size=%s",
        scoring_config_path(),
        len(vocabulary),
    )
    yield
