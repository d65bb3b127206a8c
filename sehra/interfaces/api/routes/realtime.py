"""Websocket endpoint for realtime chat."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from sehra.application.use_cases.messages import (
    count_unread,
    mark_conversation_read,
    send_message,
)
from sehra.application.use_cases.supervision import assign_supervisor
from sehra.domain.entities import User, UserRole
from sehra.infrastructure.database import SessionLocal
from sehra.infrastructure.realtime import chat_frame, chat_manager, serialize_message
from sehra.interfaces.api.dependencies import resolve_current_user
from sehra.interfaces.api.schemas import (
    AuthenticatePayload,
    MarkReadPayload,
    SendMessagePayload,
    SupervisorAllocatedPayload,
    WsInbound,
)

router = APIRouter(tags=["realtime"])
logger = logging.getLogger(__name__)

POLICY_VIOLATION = 1008


def _error(message: str) -> dict[str, Any]:
    return chat_frame("error", {"message": message})


async def _receive_frame(websocket: WebSocket) -> WsInbound | None:
    """Return the next well-formed frame, or ``None`` for garbage input."""

    try:
        raw = await websocket.receive_json()
    except WebSocketDisconnect:
        raise
    except ValueError:
        return None
    try:
        return WsInbound.model_validate(raw)
    except ValidationError:
        return None


def _parse(model: type[BaseModel], data: dict[str, Any]) -> BaseModel | None:
    try:
        return model.model_validate(data)
    except ValidationError:
        return None


async def _authenticate(websocket: WebSocket, frame: WsInbound) -> User | None:
    payload = _parse(AuthenticatePayload, frame.data)
    if payload is None:
        await websocket.send_json(
            chat_frame("authentication_error", {"message": "Invalid authentication data"})
        )
        return None

    session = SessionLocal()
    try:
        return resolve_current_user(payload.token, session)
    except HTTPException as exc:
        await websocket.send_json(chat_frame("authentication_error", {"message": exc.detail}))
        return None
    finally:
        session.close()


async def _handle_send_message(
    websocket: WebSocket, session: Session, user: User, data: dict[str, Any]
) -> None:
    payload = _parse(SendMessagePayload, data)
    if payload is None:
        await websocket.send_json(_error("Invalid message payload"))
        return

    try:
        message = send_message(
            session,
            sender_id=user.id,
            to_user_id=payload.to_user_id,
            content=payload.content,
            message_type=payload.message_type,
        )
    except ValueError as exc:
        await websocket.send_json(_error(str(exc)))
        return

    await websocket.send_json(chat_frame("message_sent", serialize_message(message)))
    await chat_manager.deliver_message(
        message,
        sender_name=user.name,
        recipient_unread=count_unread(session, user_id=message.to_user_id),
    )


async def _handle_mark_read(
    websocket: WebSocket, session: Session, user: User, data: dict[str, Any]
) -> None:
    payload = _parse(MarkReadPayload, data)
    if payload is None:
        await websocket.send_json(_error("Invalid mark_read payload"))
        return

    updated = mark_conversation_read(
        session, reader_id=user.id, from_user_id=payload.from_user_id
    )
    await websocket.send_json(
        chat_frame(
            "messages_marked_read",
            {"success": True, "from_user_id": payload.from_user_id, "count": updated},
        )
    )
    await websocket.send_json(
        chat_frame("unread_count", {"count": count_unread(session, user_id=user.id)})
    )
    await chat_manager.notify_read(reader_id=user.id, sender_id=payload.from_user_id)


async def _handle_supervisor_allocated(
    websocket: WebSocket, session: Session, user: User, data: dict[str, Any]
) -> None:
    if not user.has_role(UserRole.ADMIN):
        await websocket.send_json(_error("Not authorized"))
        return
    payload = _parse(SupervisorAllocatedPayload, data)
    if payload is None:
        await websocket.send_json(_error("Invalid client or supervisor ID"))
        return

    try:
        assign_supervisor(
            session, client_id=payload.client_id, supervisor_id=payload.supervisor_id
        )
    except ValueError as exc:
        await websocket.send_json(_error(str(exc)))
        return
    await websocket.send_json(
        chat_frame(
            "allocation_success",
            {
                "success": True,
                "client_id": payload.client_id,
                "supervisor_id": payload.supervisor_id,
            },
        )
    )


@router.websocket("/ws")
async def chat_websocket(websocket: WebSocket) -> None:
    """Realtime chat channel; the first frame must be ``authenticate``."""

    await websocket.accept()
    user: User | None = None
    try:
        while user is None:
            frame = await _receive_frame(websocket)
            if frame is None:
                await websocket.send_json(_error("Malformed frame"))
                continue
            if frame.type == "ping":
                await websocket.send_json(chat_frame("pong", {}))
                continue
            if frame.type != "authenticate":
                await websocket.send_json(_error("Not authenticated"))
                continue
            user = await _authenticate(websocket, frame)
            if user is None:
                await websocket.close(code=POLICY_VIOLATION)
                return

        chat_manager.join(user.id, websocket)
        session = SessionLocal()
        try:
            await websocket.send_json(
                chat_frame(
                    "authenticated",
                    {"success": True, "user_id": user.id, "role": user.role.value},
                )
            )
            await websocket.send_json(
                chat_frame("unread_count", {"count": count_unread(session, user_id=user.id)})
            )
            while True:
                frame = await _receive_frame(websocket)
                if frame is None:
                    await websocket.send_json(_error("Malformed frame"))
                elif frame.type == "ping":
                    await websocket.send_json(chat_frame("pong", {}))
                elif frame.type == "send_message":
                    await _handle_send_message(websocket, session, user, frame.data)
                elif frame.type == "mark_read":
                    await _handle_mark_read(websocket, session, user, frame.data)
                elif frame.type == "supervisor_allocated":
                    await _handle_supervisor_allocated(websocket, session, user, frame.data)
                elif frame.type == "authenticate":
                    await websocket.send_json(
                        chat_frame(
                            "authenticated",
                            {"success": True, "user_id": user.id, "role": user.role.value},
                        )
                    )
                else:
                    await websocket.send_json(_error(f"Unknown event: {frame.type}"))
        finally:
            session.close()
            chat_manager.leave(user.id, websocket)
    except WebSocketDisconnect:
        logger.debug("Realtime socket closed for user %s", user.id if user else None)
