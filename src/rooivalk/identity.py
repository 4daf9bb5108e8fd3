"""The bot's own identity, fixed once the client has logged in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from rooivalk.constants import ASSISTANT_LABEL


def mention_pattern(user_id: int) -> re.Pattern[str]:
    """Match both ``<@id>`` and the legacy nickname form ``<@!id>``."""

    return re.compile(rf"<@!?{user_id}>")


@dataclass(frozen=True, slots=True)
class AssistantIdentity:
    """Bot user id, display label and compiled mention pattern."""

    user_id: int
    label: str
    mention: re.Pattern[str]

    @classmethod
    def from_user(cls, user: Any) -> "AssistantIdentity":
        label = (
            getattr(user, "display_name", None)
            or getattr(user, "name", None)
            or ASSISTANT_LABEL
        )
        return cls(user_id=user.id, label=label, mention=mention_pattern(user.id))

    def is_mentioned_in(self, text: str | None) -> bool:
        return bool(text) and self.mention.search(text) is not None


__all__ = ["AssistantIdentity", "mention_pattern"]
