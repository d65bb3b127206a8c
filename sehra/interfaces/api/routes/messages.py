"""Endpoints for chat history, unread counters and contacts."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sehra.application.use_cases.messages import (
    count_unread,
    list_chat_contacts,
    list_conversation,
    unread_counts_by_sender,
)
from sehra.domain.entities import User
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import get_current_user
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import ChatContactRead, MessageRead, UnreadCountResponse

router = APIRouter(tags=["messages"])


# Declared before "/messages/{user_id}".
@router.get("/messages/unread/count", response_model=UnreadCountResponse)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCountResponse:
    return UnreadCountResponse(
        count=count_unread(db, user_id=current_user.id),
        by_sender=unread_counts_by_sender(db, user_id=current_user.id),
    )


@router.get("/messages/{user_id}", response_model=list[MessageRead])
def read_conversation(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[MessageRead]:
    """Return the conversation with ``user_id``, marking incoming messages read."""

    try:
        messages = list_conversation(db, user_id=current_user.id, other_user_id=user_id)
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return [MessageRead.model_validate(message) for message in messages]


@router.get("/chat/users", response_model=list[ChatContactRead])
def read_chat_contacts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ChatContactRead]:
    unread = unread_counts_by_sender(db, user_id=current_user.id)
    return [
        ChatContactRead(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            role=contact.role,
            unread_count=unread.get(contact.id, 0),
        )
        for contact in list_chat_contacts(db, user=current_user)
    ]
