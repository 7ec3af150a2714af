"""AI chat endpoint."""

from fastapi import APIRouter, Depends, Request

from console.auth.dependencies import require_user
from console.chat.schemas import ChatReply, ChatRequest
from console.chat.service import ChatService
from console.users.schemas import User

router = APIRouter(prefix="", tags=["chat"])


def get_chat(request: Request) -> ChatService:
    return request.app.state.chat


@router.get("/status")
async def chat_status(chat: ChatService = Depends(get_chat)):
    return {"configured": chat.configured, "model": chat.model}


@router.post("", response_model=ChatReply)
async def send_message(
    body: ChatRequest,
    chat: ChatService = Depends(get_chat),
    user: User = Depends(require_user),
):
    """Ask the assistant; the caller keeps the conversation history."""
    return await chat.complete(body.message, body.history)
