import logging
from collections.abc import Callable

from raqim.config import Settings
from raqim.exceptions import MessageNotFoundError
from raqim.schemas.chat import ImprovementType, Message, MessageRole
from raqim.services.llm import ChatMessage, LLMClient
from raqim.services.message_store import MessageStore
from raqim.services.responder import canned_reply
from raqim.utils.text import general_improve, make_longer, make_shorter, restructure

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
أنت "رقيم" - مساعد ذكي شخصي عربي متخصص في:
- إدارة المشاريع والأفكار
- إنشاء المحتوى بجودة عالية
- تنظيم القرارات والملاحظات
- تقديم إجابات واضحة ومفيدة

قدم ردوداً احترافية ومنظمة باللغة العربية الفصحى."""

_IMPROVERS: dict[ImprovementType, Callable[[str], str]] = {
    ImprovementType.SHORTER: make_shorter,
    ImprovementType.LONGER: make_longer,
    ImprovementType.RESTRUCTURE: restructure,
    ImprovementType.GENERAL: general_improve,
}


class ChatService:
    def __init__(self, llm_client: LLMClient, store: MessageStore, settings: Settings) -> None:
        self._llm = llm_client
        self._store = store
        self._history_limit = settings.chat_history_limit

    async def reply(
        self,
        message: str,
        *,
        session_id: str | None = None,
        context: str | None = None,
    ) -> tuple[Message, Message]:
        """Store the user message, generate and score a reply, store it.

        Returns (user_message, assistant_message). Raises LLMError when the
        configured provider fails; nothing is stored for the reply in that case.
        """
        session_id = session_id or None
        history = self._store.history(session_id) if session_id else []
        user_message = self._store.add_user_message(message, session_id)

        if self._llm.is_configured:
            prompt = self._build_prompt(message, history, context)
            response = await self._llm.chat(prompt)
            content = response.content
        else:
            logger.debug("LLM not configured, using canned reply")
            content = canned_reply(message)

        assistant_message = self._store.add_assistant_message(content, session_id)
        return user_message, assistant_message

    def improve(self, message_id: str, improvement_type: ImprovementType) -> Message:
        """Rewrite an assistant message and store the scored rewrite as a new message."""
        original = self._store.get(message_id)
        if original is None or original.role != MessageRole.ASSISTANT:
            raise MessageNotFoundError(f"Message {message_id} not found")

        improved = _IMPROVERS[improvement_type](original.content)
        logger.info("Improving message %s (%s)", message_id, improvement_type)
        return self._store.add_assistant_message(improved, original.session_id)

    def history(self, session_id: str) -> list[Message]:
        return self._store.history(session_id)

    def _build_prompt(
        self,
        message: str,
        history: list[Message],
        context: str | None,
    ) -> list[ChatMessage]:
        system = SYSTEM_PROMPT
        if context:
            system += f"\n\nسياق إضافي:\n{context}"

        prompt = [ChatMessage(role="system", content=system)]
        recent = history[-self._history_limit :] if self._history_limit > 0 else []
        prompt.extend(ChatMessage(role=m.role.value, content=m.content) for m in recent)
        prompt.append(ChatMessage(role="user", content=message))
        return prompt
