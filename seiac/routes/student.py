"""Student polling routes for live messages and block status.

Students are identified by the attempt's unique code and their email, the
same pair the teacher panel uses when publishing.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from seiac.dependencies import (
    build_session_key,
    get_live_store,
    get_student_key,
    require_not_blocked,
)
from seiac.schemas import AckRequest
from seiac.session_store import LiveCoordinationStore

router = APIRouter()


@router.get("/messages")
def get_live_student_messages(
    key: str = Depends(get_student_key),
    store: LiveCoordinationStore = Depends(get_live_store),
):
    """Return pending messages and remove them so they are shown only once."""
    messages = store.bus.consume(key)
    return {"success": True, "messages": [m.to_dict() for m in messages]}


@router.get("/messages/peek")
def peek_live_student_messages(
    key: str = Depends(get_student_key),
    store: LiveCoordinationStore = Depends(get_live_store),
):
    """Return pending messages without consuming them."""
    messages = store.bus.peek(key)
    return {"success": True, "messages": [m.to_dict() for m in messages]}


@router.post("/messages/ack")
def ack_live_student_message(
    payload: AckRequest,
    store: LiveCoordinationStore = Depends(get_live_store),
):
    key = build_session_key(payload.unique_code, payload.email)
    return {"success": store.bus.ack(key, payload.id)}


@router.get("/block-status")
def get_student_block_status(
    key: str = Depends(get_student_key),
    store: LiveCoordinationStore = Depends(get_live_store),
):
    status = store.blocks.is_user_blocked(key)
    return {"success": True, **status.to_dict()}


@router.post("/heartbeat")
def student_heartbeat(key: str = Depends(require_not_blocked)):
    """Protected keep-alive for an evaluation in progress; refused while blocked."""
    return {"success": True}
