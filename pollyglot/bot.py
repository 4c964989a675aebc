import logging
from slack_bolt.async_app import AsyncApp

from .config import settings
from .handlers.events import handle_hello_message, handle_reaction_added
from .handlers.poll import POLL_MODAL_CALLBACK, POLL_SHORTCUT, handle_create_poll_shortcut, handle_poll_submission

logger = logging.getLogger(__name__)


def create_slack_app() -> AsyncApp:
    """Create and configure Slack app"""
    app = AsyncApp(
        token=settings.slack.bot_token,
        signing_secret=settings.slack.signing_secret,
        process_before_response=settings.app.process_before_response
    )

    # Register message listeners
    app.message("hello")(handle_hello_message)

    # Register poll shortcut and modal handlers
    app.shortcut(POLL_SHORTCUT)(handle_create_poll_shortcut)
    app.view(POLL_MODAL_CALLBACK)(handle_poll_submission)

    # Register event handlers
    app.event("reaction_added")(handle_reaction_added)

    logger.info(f"Slack app created ({settings.app.environment})")
    return app
