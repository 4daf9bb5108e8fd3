"""Render a reconstructed conversation into a single prompt string."""

from __future__ import annotations

import re
from typing import Sequence

from rooivalk.constants import ASSISTANT_LABEL
from rooivalk.response.history import ChainEntry

USER_LABEL = "User"


def strip_mention(text: str | None, mention: re.Pattern[str] | None) -> str:
    """Remove every mention of the bot from ``text`` and trim it."""

    text = text or ""
    if mention is not None:
        text = mention.sub("", text)
    return text.strip()


def _render(entry: ChainEntry, content: str, assistant_label: str) -> str:
    label = assistant_label if entry.author == "assistant" else USER_LABEL
    line = f"{label}: {content}"
    if entry.attachment_urls:
        line = f"{line} Attachments: {', '.join(entry.attachment_urls)}"
    return line


def build_prompt(
    chain: Sequence[ChainEntry],
    mention: re.Pattern[str] | None,
    assistant_label: str = ASSISTANT_LABEL,
) -> str | None:
    """
    Render ``chain`` oldest first, one ``"<Label>: <content>"`` line per entry.

    Only the final entry, and only when a user wrote it, has the bot's mention
    stripped. Returns ``None`` for an empty chain.
    """

    if not chain:
        return None

    last = len(chain) - 1
    lines = []
    for idx, entry in enumerate(chain):
        content = entry.content
        if idx == last and entry.author == "user":
            content = strip_mention(content, mention)
        lines.append(_render(entry, content, assistant_label))
    return "\n".join(lines)


__all__ = ["build_prompt", "strip_mention", "USER_LABEL"]
