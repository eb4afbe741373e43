import logging

from zkcheck.config import settings
from zkcheck.runner import loop_forever

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

loop_forever(settings.MONITOR_INTERVAL)
