"""
Run the reminder alert loop against a running record store.

Usage: ``python -m medtracker.client`` (configure API_URL and the
ALERT_* settings through the environment or a .env file).
"""
from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging

from ..config import settings
from .api import RecordStoreClient
from .loop import ReminderAlertLoop
from .notifier import ConsoleAlertNotifier

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

async def main() -> None:
    async with RecordStoreClient() as store:
        loop = ReminderAlertLoop.from_settings(store, ConsoleAlertNotifier())
        await loop.run()

if __name__ == "__main__":
    logger.info(f"🔔 Watching reminders at {settings.api_url}")
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Reminder alerts stopped")
