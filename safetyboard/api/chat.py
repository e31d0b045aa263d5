import logging
from json import JSONDecodeError
from fastapi import APIRouter, Depends, HTTPException, Request, Body
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy import desc
from sqlalchemy.orm import Session
from safetyboard.core import clock, config
from safetyboard.db.session import get_db
from safetyboard.models.models import ChatConversation, ChatMessage, ChatRole, Portal, next_id
from safetyboard.schemas.schemas import ConversationCreate, ConversationRename, MessageCreate
from safetyboard.services.ai_service import ChatNotConfigured, build_data_context, complete_chat
from safetyboard.services.serializers import serialize_conversation, serialize_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

DEFAULT_TITLE = "New Conversation"
ID_PREFIXES = {
    Portal.SUPERVISOR: ("chat", "msg"),
    Portal.EMPLOYEE: ("emp-chat", "emp-msg"),
}


def title_from_message(content: str) -> str:
    return content[:30] + ("..." if len(content) > 30 else "")


def _answer(db: Session, messages: list[dict]) -> str:
    return complete_chat(build_data_context(db), messages)


@router.post("/chat")
async def chat(request: Request, db: Session = Depends(get_db)):
    api_key = config.get_chat_api_key()
    if not api_key or api_key == config.PLACEHOLDER_API_KEY:
        return JSONResponse(status_code=500, content={
            "error": "API key not configured",
            "details": "Please add your Google API key to the .env file as GOOGLE_API_KEY",
        })

    try:
        body = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        body = None
    messages = body.get("messages") if isinstance(body, dict) else None
    if not messages or not isinstance(messages, list) or not all(isinstance(m, dict) for m in messages):
        return JSONResponse(status_code=400, content={"error": "Invalid request: messages array is required"})

    try:
        # context queries and the model call both block
        text = await run_in_threadpool(_answer, db, messages)
    except Exception as e:
        logger.exception("Chat API error")
        return JSONResponse(status_code=500, content={"error": "Failed to generate response", "details": str(e)})
    return {"message": text, "model": config.CHAT_MODEL}


def build_conversation_router(portal: Portal) -> APIRouter:
    conv_router = APIRouter(prefix=f"/api/{portal.value}/chat", tags=[f"{portal.value}-chat"])
    conv_prefix, msg_prefix = ID_PREFIXES[portal]

    def _get_conversation_or_404(db: Session, conversation_id: str) -> ChatConversation:
        conversation = db.query(ChatConversation).filter(
            ChatConversation.id == conversation_id,
            ChatConversation.portal == portal
        ).first()
        if not conversation:
            raise HTTPException(status_code=404, detail="Conversation not found")
        return conversation

    @conv_router.get("/conversations")
    def list_conversations(db: Session = Depends(get_db)):
        conversations = db.query(ChatConversation).filter(
            ChatConversation.portal == portal
        ).order_by(desc(ChatConversation.updated_at)).all()
        return [serialize_conversation(c) for c in conversations]

    @conv_router.post("/conversations", status_code=201)
    def create_conversation(data: ConversationCreate = Body(ConversationCreate()), db: Session = Depends(get_db)):
        now = clock.now()
        conversation = ChatConversation(
            id=next_id(db, ChatConversation, conv_prefix),
            portal=portal,
            title=data.title,
            created_at=now,
            updated_at=now,
        )
        db.add(conversation)
        db.commit()
        db.refresh(conversation)
        return serialize_conversation(conversation, detail=True)

    @conv_router.get("/conversations/{conversation_id}")
    def get_conversation(conversation_id: str, db: Session = Depends(get_db)):
        return serialize_conversation(_get_conversation_or_404(db, conversation_id), detail=True)

    @conv_router.patch("/conversations/{conversation_id}")
    def rename_conversation(conversation_id: str, data: ConversationRename, db: Session = Depends(get_db)):
        conversation = _get_conversation_or_404(db, conversation_id)
        conversation.title = data.title
        conversation.updated_at = clock.now()
        db.commit()
        db.refresh(conversation)
        return serialize_conversation(conversation)

    @conv_router.delete("/conversations/{conversation_id}")
    def delete_conversation(conversation_id: str, db: Session = Depends(get_db)):
        conversation = _get_conversation_or_404(db, conversation_id)
        db.delete(conversation)
        db.commit()
        return {"ok": True}

    @conv_router.post("/conversations/{conversation_id}/messages")
    def send_message(conversation_id: str, data: MessageCreate, db: Session = Depends(get_db)):
        conversation = _get_conversation_or_404(db, conversation_id)
        is_first = not any(m.role == ChatRole.USER for m in conversation.messages)

        user_msg = ChatMessage(
            id=next_id(db, ChatMessage, msg_prefix),
            role=ChatRole.USER,
            content=data.content,
            timestamp=clock.now(),
        )
        conversation.messages.append(user_msg)
        db.flush()

        history = [{"role": m.role.value, "content": m.content} for m in conversation.messages]
        try:
            ai_content = complete_chat(build_data_context(db), history)
        except ChatNotConfigured as e:
            ai_content = f"I apologize, but I'm currently unable to process your request. Error: {e}"
        except Exception as e:
            logger.exception("Chat completion failed for conversation %s", conversation_id)
            ai_content = f"I apologize, but I'm currently unable to process your request. Error: {e}"

        ai_msg = ChatMessage(
            id=next_id(db, ChatMessage, msg_prefix),
            role=ChatRole.ASSISTANT,
            content=ai_content,
            timestamp=clock.now(),
        )
        conversation.messages.append(ai_msg)
        if is_first and conversation.title == DEFAULT_TITLE:
            conversation.title = title_from_message(data.content)
        conversation.updated_at = ai_msg.timestamp
        db.commit()
        db.refresh(conversation)

        return {
            "conversation": serialize_conversation(conversation),
            "user_message": serialize_message(user_msg),
            "assistant_message": serialize_message(ai_msg),
        }

    return conv_router


supervisor_chat_router = build_conversation_router(Portal.SUPERVISOR)
employee_chat_router = build_conversation_router(Portal.EMPLOYEE)
