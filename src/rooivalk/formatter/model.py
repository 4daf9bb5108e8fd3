"""Dataclass models for outbound Discord replies.

An :class:`OutboundReply` is a platform-neutral description of one message;
``to_message_kwargs`` and ``to_edit_kwargs`` turn it into the keyword
arguments discord.py expects:

```
reply.to_message_kwargs()
{"content": "...", "embeds": [Embed(...)], "files": [File(...)],
 "allowed_mentions": AllowedMentions(users=[Object(id=...)])}
```

Empty collections are omitted so discord.py leaves those fields untouched.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import discord


@dataclass(frozen=True, slots=True)
class ImageEmbed:
    """Image shown as an embed below the reply text."""

    url: str

    def to_discord(self) -> discord.Embed:
        return discord.Embed().set_image(url=self.url)


@dataclass(frozen=True, slots=True)
class FileAttachment:
    """In-memory file uploaded alongside the reply."""

    name: str
    data: bytes

    def to_discord(self) -> discord.File:
        return discord.File(io.BytesIO(self.data), filename=self.name)


@dataclass(slots=True)
class OutboundReply:
    content: str
    embeds: List[ImageEmbed] = field(default_factory=list)
    file: Optional[FileAttachment] = None
    allowed_mentions: List[int] = field(default_factory=list)

    def discord_allowed_mentions(self) -> discord.AllowedMentions:
        """Only ping the users we were told to, never @everyone or roles."""

        return discord.AllowedMentions(
            everyone=False,
            roles=False,
            users=[discord.Object(id=user_id) for user_id in self.allowed_mentions],
        )

    def to_message_kwargs(self) -> Dict[str, Any]:
        """Arguments for ``Message.reply`` / ``Messageable.send``."""

        kwargs: Dict[str, Any] = {
            "content": self.content,
            "allowed_mentions": self.discord_allowed_mentions(),
        }
        if self.embeds:
            kwargs["embeds"] = [embed.to_discord() for embed in self.embeds]
        if self.file is not None:
            kwargs["files"] = [self.file.to_discord()]
        return kwargs

    def to_edit_kwargs(self) -> Dict[str, Any]:
        """Arguments for ``Interaction.edit_original_response``."""

        kwargs: Dict[str, Any] = {
            "content": self.content,
            "allowed_mentions": self.discord_allowed_mentions(),
        }
        if self.embeds:
            kwargs["embeds"] = [embed.to_discord() for embed in self.embeds]
        if self.file is not None:
            kwargs["attachments"] = [self.file.to_discord()]
        return kwargs


__all__ = ["ImageEmbed", "FileAttachment", "OutboundReply"]
