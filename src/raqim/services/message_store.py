import logging
import uuid

from raqim.schemas.chat import Message, MessageEvaluation, MessageRole
from raqim.services.evaluator import detect_contradictions, evaluate_response

logger = logging.getLogger(__name__)


class MessageStore:
    """In-memory chat message repository, in insertion order."""

    def __init__(self) -> None:
        self._messages: dict[str, Message] = {}

    def add_user_message(self, content: str, session_id: str | None) -> Message:
        message = Message(
            id=uuid.uuid4().hex,
            session_id=session_id,
            role=MessageRole.USER,
            content=content,
        )
        self._messages[message.id] = message
        return message

    def add_assistant_message(self, content: str, session_id: str | None) -> Message:
        """Score ``content`` and store it as an assistant reply."""
        evaluation = evaluate_response(content)
        contradictions = detect_contradictions(content)
        message = Message(
            id=uuid.uuid4().hex,
            session_id=session_id,
            role=MessageRole.ASSISTANT,
            content=content,
            quality_score=evaluation.overall_score,
            evaluation=MessageEvaluation(
                length=evaluation.length,
                repetition=evaluation.repetition,
                structure=evaluation.structure,
            ),
            contradictions=contradictions,
        )
        self._messages[message.id] = message
        logger.info(
            "Stored assistant message %s: quality=%d, contradictions=%d",
            message.id,
            evaluation.overall_score,
            len(contradictions),
        )
        return message

    def get(self, message_id: str) -> Message | None:
        return self._messages.get(message_id)

    def history(self, session_id: str) -> list[Message]:
        return [m for m in self._messages.values() if m.session_id == session_id]
