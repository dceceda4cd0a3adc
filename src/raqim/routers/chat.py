from fastapi import APIRouter, Depends, HTTPException

from raqim.dependencies import get_chat_service
from raqim.exceptions import LLMError, MessageNotFoundError
from raqim.schemas.chat import ChatRequest, ChatTurnResponse, ImproveRequest, Message
from raqim.services.chat import ChatService

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("", response_model=ChatTurnResponse)
async def chat(
    body: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatTurnResponse:
    """Send a message and receive a scored assistant reply."""
    if not body.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    try:
        user_message, assistant_message = await service.reply(
            body.message, session_id=body.session_id, context=body.context
        )
    except LLMError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ChatTurnResponse(user_message=user_message, assistant_message=assistant_message)


@router.post("/improve", response_model=Message)
async def improve(
    body: ImproveRequest,
    service: ChatService = Depends(get_chat_service),
) -> Message:
    """Rewrite an assistant reply and return the re-scored version."""
    try:
        return service.improve(body.message_id, body.improvement_type)
    except MessageNotFoundError:
        raise HTTPException(status_code=404, detail="Message not found")


@router.get("/history/{session_id}", response_model=list[Message])
async def history(
    session_id: str,
    service: ChatService = Depends(get_chat_service),
) -> list[Message]:
    return service.history(session_id)
