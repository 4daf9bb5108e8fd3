import random
import re
from typing import List, Sequence, Tuple

from rooivalk.catalogue import ResponseCatalogue, ResponseType, get_response
from rooivalk.constants import DISCORD_MESSAGE_LIMIT, REPLY_ATTACHMENT_NAME
from .model import FileAttachment, ImageEmbed, OutboundReply

import logging
logger = logging.getLogger(__name__)

# --------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------- #

# ![alt](https://host/path.png?query) -- only direct image links are lifted out
_IMAGE_MARKDOWN_RE = re.compile(
    r"!\[.*?\]\((https?://.*?\.(?:png|jpe?g|gif|webp)(?:\?.*?)?)\)",
    re.IGNORECASE,
)


def extract_images(content: str) -> Tuple[str, List[str]]:
    """
    Split markdown image tags out of ``content``.

    :returns: ``(text_without_images, image_urls)`` with URLs in order of
        appearance and the remaining text trimmed.
    """
    urls = [match.group(1) for match in _IMAGE_MARKDOWN_RE.finditer(content)]
    stripped = _IMAGE_MARKDOWN_RE.sub("", content).strip()
    return stripped, urls

# --------------------------------------------------------------------- #
#  Main entry
# --------------------------------------------------------------------- #

def build_reply(
    content: str,
    allowed_mentions: Sequence[int] = (),
    *,
    catalogue: ResponseCatalogue,
    rng: random.Random | None = None,
    limit: int = DISCORD_MESSAGE_LIMIT,
) -> OutboundReply:
    """
    Turn model output into a Discord-valid reply.

    Image markdown becomes embeds. A body longer than ``limit`` is sent as a
    ``rooivalk.md`` attachment with a canned notice as the message text.

    :param content: Raw model output.
    :param allowed_mentions: User ids that may be pinged by this reply.
    :param catalogue: Source of the "too long" notice.
    """
    body, image_urls = extract_images(content or "")
    embeds = [ImageEmbed(url=url) for url in image_urls]
    mentions = list(allowed_mentions)

    if len(body) > limit:
        logger.info(
            "Reply body is %d characters (limit %d); sending as %s",
            len(body),
            limit,
            REPLY_ATTACHMENT_NAME,
        )
        return OutboundReply(
            content=get_response(ResponseType.DISCORD_LIMIT, catalogue, rng),
            embeds=embeds,
            file=FileAttachment(name=REPLY_ATTACHMENT_NAME, data=body.encode("utf-8")),
            allowed_mentions=mentions,
        )

    return OutboundReply(content=body, embeds=embeds, allowed_mentions=mentions)
