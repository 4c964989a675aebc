from typing import List, Optional

from pydantic import BaseModel, Field

# Block ids of the poll modal, in display order
CONVERSATION_BLOCK = "target_conversation"
QUESTION_BLOCK = "poll_question"
OPTION_BLOCKS = ("option_1", "option_2", "option_3")
INPUT_ACTION = "input"


class FlagReaction(BaseModel):
    reaction: str
    user: str
    channel: str
    ts: str
    item_type: str = "message"

    @classmethod
    def from_event(cls, event: dict) -> Optional["FlagReaction"]:
        """Build from a reaction_added event, or None if it lacks a target"""
        item = event.get('item', {})
        user = event.get('user')
        channel = item.get('channel')
        ts = item.get('ts')

        if not all([user, channel, ts]):
            return None

        return cls(
            reaction=event.get('reaction', ''),
            user=user,
            channel=channel,
            ts=ts,
            item_type=item.get('type', 'message'),
        )


class PollSubmission(BaseModel):
    conversation_id: str
    question: str
    options: List[str] = Field(..., min_length=3, max_length=3)
    author_id: str

    @classmethod
    def from_view(cls, view: dict, author_id: str) -> "PollSubmission":
        """Read the poll fields out of a submitted poll modal"""
        values = view['state']['values']
        return cls(
            conversation_id=values[CONVERSATION_BLOCK][INPUT_ACTION]['selected_conversation'],
            question=values[QUESTION_BLOCK][INPUT_ACTION]['value'],
            options=[values[block][INPUT_ACTION]['value'] for block in OPTION_BLOCKS],
            author_id=author_id,
        )
