"""Teacher live panel routes: messages and temporary blocks for students."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from seiac.config import Settings
from seiac.dependencies import (
    build_session_key,
    get_current_teacher,
    get_live_store,
    get_settings,
)
from seiac.schemas import BlockRequest, BroadcastRequest, Participant, SendMessageRequest
from seiac.session_store import LiveCoordinationStore

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_teacher)])


def _require_content(content: str) -> str:
    if not content or not content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message content must not be empty.",
        )
    return content


@router.post("/messages")
def send_message_to_student(
    payload: SendMessageRequest,
    store: LiveCoordinationStore = Depends(get_live_store),
    settings: Settings = Depends(get_settings),
):
    """Publish a temporary message to one student."""
    content = _require_content(payload.content)
    key = build_session_key(payload.unique_code, payload.email)
    message = store.bus.publish(
        key,
        content,
        ttl_ms=payload.ttl_ms or settings.LIVE_MESSAGE_TTL_MS,
        scope="individual",
    )
    logger.info("Published live message %s to %s", message.id, key)
    return {"success": True, "message": message.to_dict()}


@router.post("/messages/broadcast")
def send_message_to_all_students(
    payload: BroadcastRequest,
    store: LiveCoordinationStore = Depends(get_live_store),
    settings: Settings = Depends(get_settings),
):
    """Publish the same temporary message to every listed student."""
    content = _require_content(payload.content)
    if not payload.recipients:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one recipient is required.",
        )
    keys = [build_session_key(r.unique_code, r.email) for r in payload.recipients]
    sent = store.bus.broadcast(keys, content, ttl_ms=payload.ttl_ms or settings.LIVE_MESSAGE_TTL_MS)
    logger.info("Broadcast live message to %d students", len(sent))
    return {"success": True, "sent": len(sent)}


@router.get("/blocks")
def list_blocks(store: LiveCoordinationStore = Depends(get_live_store)):
    """List every active block."""
    return {"success": True, "blocks": [record.to_dict() for record in store.blocks.get_all_blocks()]}


@router.post("/blocks")
def block_student(
    payload: BlockRequest,
    store: LiveCoordinationStore = Depends(get_live_store),
    settings: Settings = Depends(get_settings),
):
    """Block a student for the requested number of minutes (minimum one)."""
    key = build_session_key(payload.unique_code, payload.email)
    minutes = payload.minutes if payload.minutes is not None else settings.LIVE_BLOCK_DEFAULT_MINUTES
    record = store.blocks.block_user(key, minutes)
    logger.info("Blocked %s until %d", key, record.blocked_until)
    return {"success": True, "block": record.to_dict()}


@router.delete("/blocks")
def unblock_student(
    payload: Participant,
    store: LiveCoordinationStore = Depends(get_live_store),
):
    """Lift a student's block before it expires."""
    key = build_session_key(payload.unique_code, payload.email)
    removed = store.blocks.unblock_user(key)
    if removed:
        logger.info("Unblocked %s", key)
    return {"success": removed}


@router.post("/sweep")
def sweep_live_store(store: LiveCoordinationStore = Depends(get_live_store)):
    """Purge expired messages and blocks right away."""
    return {"success": True, "summary": store.sweep()}
