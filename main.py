"""
FastAPI Slack bot server
Greets, runs polls and translates messages on flag emoji reactions
"""

import logging
import sys
from datetime import datetime

from fastapi import FastAPI, Request
from pydantic import ValidationError
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler
import uvicorn

try:
    from pollyglot.config import settings
except ValidationError as e:
    logging.basicConfig(level=logging.INFO)
    missing = ", ".join(str(err["loc"][0]) for err in e.errors())
    logging.getLogger(__name__).error(f"Missing or invalid {e.title} settings: {missing}")
    sys.exit(1)

logging.basicConfig(
    level=settings.app.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Set Azure OpenAI and httpx to WARNING level to reduce noise
logging.getLogger('openai').setLevel(logging.WARNING)
logging.getLogger('httpx').setLevel(logging.WARNING)

from pollyglot.bot import create_slack_app
from pollyglot.services.translation import translation_service

VERSION = "1.0.0"

slack_app = create_slack_app()
slack_handler = AsyncSlackRequestHandler(slack_app)

app = FastAPI(
    title="Pollyglot",
    description="Slack greeting, poll and flag translation bot",
    version=VERSION
)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "pollyglot",
        "version": VERSION,
        "timestamp": datetime.now().isoformat()
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "service": "pollyglot",
        "translation_service": translation_service.available,
        "environment": settings.app.environment
    }


@app.post("/slack/events")
async def slack_events(request: Request):
    """Slack events, shortcuts and view submissions"""
    return await slack_handler.handle(request)


if __name__ == "__main__":
    logger.info(f"Bolt app is running on port {settings.app.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.app.port)
