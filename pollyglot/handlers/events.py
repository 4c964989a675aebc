import logging
from typing import Optional

from slack_sdk.errors import SlackApiError

from ..languages import resolve_language
from ..models import FlagReaction
from ..services.translation import TranslationError, translation_service

logger = logging.getLogger(__name__)


def format_translation_reply(reaction: str, language_name: str, translated_text: str) -> str:
    return f":{reaction}: *Here is the translation of this message in {language_name}:*\n {translated_text}"


async def handle_hello_message(message: dict, say):
    """Greet whoever says hello"""
    user = message.get('user')
    # Classic bot and webhook posts carry a bot_id instead of a user
    if not user:
        return
    await say(f"Hello, <@{user}>!")


async def fetch_message_text(client, channel: str, ts: str) -> Optional[str]:
    """Return the text of the top-level message posted at ts, if any"""
    result = await client.conversations_history(
        channel=channel,
        latest=ts,
        limit=1,
        inclusive=True
    )

    messages = result.get('messages') or []
    if not messages:
        return None

    message = messages[0]
    # History only holds top-level messages; a reply in a thread comes back
    # as whatever was posted to the channel before it.
    if message.get('ts') != ts:
        logger.info(f"Message {ts} in {channel} is not a top-level message, skipping")
        return None

    return message.get('text', '').strip() or None


async def handle_reaction_added(event: dict, client):
    """Handle flag emoji reactions by translating the message into that country's language"""
    reaction = FlagReaction.from_event(event)
    if reaction is None or reaction.item_type != 'message':
        return

    language = resolve_language(reaction.reaction)
    if language is None:
        return

    try:
        text = await fetch_message_text(client, reaction.channel, reaction.ts)
    except SlackApiError as e:
        logger.warning(f"Could not fetch message {reaction.ts} in {reaction.channel}: {e.response['error']}")
        return

    if not text:
        return

    try:
        translated_text = await translation_service.translate(text, language.code)
    except TranslationError as e:
        logger.error(f"Translation to {language.name} failed for user {reaction.user}: {e}")
        return

    await client.chat_postMessage(
        channel=reaction.channel,
        thread_ts=reaction.ts,
        text=format_translation_reply(reaction.reaction, language.name, translated_text)
    )

    logger.info(f"Reaction translation to {language.name} completed for user {reaction.user}")
