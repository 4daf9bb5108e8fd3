"""Helpers for reconstructing the conversation that led to a message."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Literal

from rooivalk.constants import MAX_MESSAGE_CHAIN_LENGTH
from rooivalk.response.ownership import resolve_reference

logger = logging.getLogger(__name__)

ChainAuthor = Literal["user", "assistant"]


@dataclass(frozen=True, slots=True)
class ChainEntry:
    """One message of a reconstructed conversation."""

    author: ChainAuthor
    content: str
    attachment_urls: tuple[str, ...] = ()


def to_entry(message: Any, assistant_id: int) -> ChainEntry:
    author: ChainAuthor = "assistant" if message.author.id == assistant_id else "user"
    attachments = getattr(message, "attachments", None) or []
    return ChainEntry(
        author=author,
        content=message.content or "",
        attachment_urls=tuple(att.url for att in attachments),
    )


def has_text_or_attachments(message: Any) -> bool:
    """False for messages with nothing to quote, such as embed-only bot posts."""

    return bool((message.content or "").strip() or getattr(message, "attachments", None))


async def build_chain(
    message: Any,
    assistant_id: int,
    max_depth: int = MAX_MESSAGE_CHAIN_LENGTH,
) -> List[ChainEntry]:
    """
    Walk the reply chain backwards from ``message``.

    Returns the ancestors oldest first followed by ``message`` itself. At most
    ``max_depth`` ancestors are fetched; a failed fetch ends the walk and keeps
    whatever was collected so far. Ancestors with neither text nor attachments
    are walked through but left out.
    """

    ancestors: list[ChainEntry] = []
    current = message
    fetched = 0

    while fetched < max_depth:
        reference = getattr(current, "reference", None)
        if reference is None or not getattr(reference, "message_id", None):
            break
        try:
            parent = await resolve_reference(current.channel, reference)
        except Exception as exc:
            logger.warning(
                "Message chain for %s cut short after %d message(s): %s",
                message.id,
                fetched,
                exc,
            )
            break
        if parent is None:
            break
        fetched += 1
        if has_text_or_attachments(parent):
            ancestors.append(to_entry(parent, assistant_id))
        current = parent

    ancestors.reverse()
    ancestors.append(to_entry(message, assistant_id))
    return ancestors


async def build_thread_chain(
    message: Any,
    assistant_id: int,
    max_depth: int = MAX_MESSAGE_CHAIN_LENGTH,
) -> List[ChainEntry]:
    """
    Return the messages preceding ``message`` in its thread plus ``message``.

    Used for thread conversations where members keep talking without replying
    to a specific message.
    """

    entries: list[ChainEntry] = []
    try:
        async for earlier in message.channel.history(limit=max_depth, before=message):
            if has_text_or_attachments(earlier):
                entries.append(to_entry(earlier, assistant_id))
    except Exception as exc:
        logger.warning("Could not read thread history for %s: %s", message.id, exc)
        entries = []

    # history() yields newest first
    entries.reverse()
    entries.append(to_entry(message, assistant_id))
    return entries


__all__ = ["ChainEntry", "to_entry", "has_text_or_attachments", "build_chain", "build_thread_chain"]
