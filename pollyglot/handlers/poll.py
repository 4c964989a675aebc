import logging

from slack_sdk.errors import SlackApiError

from ..models import CONVERSATION_BLOCK, INPUT_ACTION, OPTION_BLOCKS, QUESTION_BLOCK, PollSubmission

logger = logging.getLogger(__name__)

POLL_SHORTCUT = "create_poll"
POLL_MODAL_CALLBACK = "poll_shortcut_modal"

# Voting emoji, one per option
POLL_REACTIONS = ("one", "two", "three")


def _text_input_block(block_id: str, label: str) -> dict:
    return {
        "type": "input",
        "block_id": block_id,
        "element": {
            "type": "plain_text_input",
            "action_id": INPUT_ACTION
        },
        "label": {
            "type": "plain_text",
            "text": label,
            "emoji": True
        }
    }


def build_poll_modal() -> dict:
    """Modal asking for the target conversation, the question and three options"""
    blocks = [
        {
            "type": "input",
            "block_id": CONVERSATION_BLOCK,
            "element": {
                "type": "conversations_select",
                "placeholder": {
                    "type": "plain_text",
                    "text": "Select a conversation",
                    "emoji": True
                },
                "filter": {
                    "include": ["public", "mpim"],
                    "exclude_bot_users": True
                },
                "action_id": INPUT_ACTION
            },
            "label": {
                "type": "plain_text",
                "text": "Select the conversation to publish your poll to:",
                "emoji": True
            }
        },
        _text_input_block(QUESTION_BLOCK, "Poll Question"),
    ]
    blocks.extend(
        _text_input_block(block_id, f"Option {number}")
        for number, block_id in enumerate(OPTION_BLOCKS, start=1)
    )

    return {
        "type": "modal",
        "callback_id": POLL_MODAL_CALLBACK,
        "title": {
            "type": "plain_text",
            "text": "Create new poll"
        },
        "submit": {
            "type": "plain_text",
            "text": "Start Poll"
        },
        "blocks": blocks
    }


def build_poll_blocks(poll: PollSubmission) -> list:
    blocks = [
        {
            "type": "section",
            "text": {
                "type": "mrkdwn",
                "text": f"<@{poll.author_id}> wants to know: *{poll.question}*"
            }
        }
    ]
    for emoji, option in zip(POLL_REACTIONS, poll.options):
        blocks.append({
            "type": "section",
            "text": {
                "type": "plain_text",
                "text": f":{emoji}: {option}",
                "emoji": True
            }
        })
    return blocks


async def handle_create_poll_shortcut(ack, shortcut: dict, client):
    """Open the poll modal from the create_poll shortcut"""
    await ack()

    try:
        await client.views_open(
            trigger_id=shortcut['trigger_id'],
            view=build_poll_modal()
        )
    except SlackApiError as e:
        logger.error(f"Error opening poll modal for user {shortcut.get('user', {}).get('id')}: {e.response['error']}")


async def notify_poll_failure(client, poll: PollSubmission, error: str):
    text = f"Sorry, I couldn't post your poll to <#{poll.conversation_id}> ({error})."
    if error == 'not_in_channel':
        text += " Invite me to the conversation and try again."

    try:
        await client.chat_postMessage(channel=poll.author_id, text=text)
    except SlackApiError as e:
        logger.error(f"Could not tell user {poll.author_id} about the failed poll: {e.response['error']}")


async def handle_poll_submission(ack, body: dict, view: dict, client):
    """Publish a submitted poll and seed it with the voting reactions"""
    await ack()

    poll = PollSubmission.from_view(view, body['user']['id'])

    try:
        result = await client.chat_postMessage(
            channel=poll.conversation_id,
            text=f"<@{poll.author_id}> wants to know: {poll.question}",
            blocks=build_poll_blocks(poll)
        )
    except SlackApiError as e:
        error = e.response['error']
        logger.error(f"Poll post to {poll.conversation_id} failed: {error}")
        await notify_poll_failure(client, poll, error)
        return

    channel = result['channel']
    ts = result['ts']

    for name in POLL_REACTIONS:
        try:
            await client.reactions_add(channel=channel, name=name, timestamp=ts)
        except SlackApiError as e:
            logger.error(f"Adding :{name}: to poll {ts} in {channel} failed: {e.response['error']}")
            return

    logger.info(f"Poll posted to {channel} for user {poll.author_id}")
