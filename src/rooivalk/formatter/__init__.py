from __future__ import annotations

from .model import FileAttachment, ImageEmbed, OutboundReply
from .reply import build_reply, extract_images

__all__ = [
    "build_reply",
    "extract_images",
    "OutboundReply",
    "ImageEmbed",
    "FileAttachment",
]
