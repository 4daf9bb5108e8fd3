"""
Markdown-backed bot content: canned responses, persona instructions and MOTD.

Layout of the config directory::

    errors.md                 - bullet list ("- line") of error responses
    greetings.md              - bullet list of startup greetings
    discord_limit.md          - bullet list of "reply too long" notices
    instructions_rooivalk.md  - default persona instructions
    instructions_learn.md     - learn persona instructions
    motd.md                   - prompt for the scheduled message of the day

Instruction files drop their first ``#`` heading and expand ``{{VERSION}}``.
Missing or empty files fall back to the built-in defaults, so the bot can boot
without a config directory at all.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from rooivalk.catalogue import ResponseCatalogue
from rooivalk.persona import DEFAULT_INSTRUCTIONS, Persona

logger = logging.getLogger(__name__)

ERRORS_FILE = "errors.md"
GREETINGS_FILE = "greetings.md"
DISCORD_LIMIT_FILE = "discord_limit.md"
MOTD_FILE = "motd.md"
INSTRUCTION_FILES: Mapping[Persona, str] = {
    Persona.DEFAULT: "instructions_rooivalk.md",
    Persona.LEARN: "instructions_learn.md",
}

DEFAULT_MOTD = (
    "Greet the server with a good morning message. Summarise the weather for the day "
    "using the forecast below, with an emoji for the conditions next to each city name. "
    "Temperatures are in Celsius."
)

_FIRST_HEADING_RE = re.compile(r"^#.*\n")


@dataclass(frozen=True, slots=True)
class BotContent:
    """Everything loaded from the markdown config directory."""

    catalogue: ResponseCatalogue = field(default_factory=ResponseCatalogue)
    instructions: Mapping[Persona, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_INSTRUCTIONS))
    )
    motd: str = DEFAULT_MOTD


class ContentStore:
    """Holds the live :class:`BotContent`; reloads swap the whole object."""

    def __init__(self, content: BotContent | None = None) -> None:
        self._content = content or BotContent()

    def get(self) -> BotContent:
        return self._content

    def replace(self, content: BotContent) -> None:
        self._content = content


def _app_version() -> str:
    try:
        return package_version("rooivalk")
    except PackageNotFoundError:
        return "0.0.0"


def parse_message_list(text: str) -> tuple[str, ...]:
    """Return the ``- item`` bullet entries of a markdown document."""

    entries = []
    for line in text.splitlines():
        line = line.strip()
        if not line.startswith("- "):
            continue
        item = line[2:].strip()
        if item:
            entries.append(item)
    return tuple(entries)


def parse_instructions(text: str, version: str) -> str:
    """Drop the leading heading and expand the ``{{VERSION}}`` template."""

    processed = _FIRST_HEADING_RE.sub("", text, count=1)
    return processed.replace("{{VERSION}}", f"v{version}").strip()


def _read(directory: Path, filename: str) -> str | None:
    path = directory / filename
    if not path.is_file():
        logger.warning("Config file %s not found; using built-in defaults.", path)
        return None
    return path.read_text(encoding="utf-8")


def _load_list(directory: Path, filename: str, fallback: tuple[str, ...]) -> tuple[str, ...]:
    text = _read(directory, filename)
    if text is None:
        return fallback
    entries = parse_message_list(text)
    if not entries:
        logger.warning("Config file %s has no entries; using built-in defaults.", filename)
        return fallback
    return entries


def _load_text(directory: Path, filename: str, fallback: str, version: str) -> str:
    text = _read(directory, filename)
    if text is None:
        return fallback
    return parse_instructions(text, version) or fallback


def load_content(directory: str | Path) -> BotContent:
    """
    Read every content file from ``directory``.

    I/O errors other than a missing file propagate so a reload can keep the
    previous content.
    """

    root = Path(directory)
    defaults = ResponseCatalogue()
    version = _app_version()

    catalogue = ResponseCatalogue(
        errors=_load_list(root, ERRORS_FILE, defaults.errors),
        greetings=_load_list(root, GREETINGS_FILE, defaults.greetings),
        discord_limit=_load_list(root, DISCORD_LIMIT_FILE, defaults.discord_limit),
    )
    instructions = {
        persona: _load_text(root, filename, DEFAULT_INSTRUCTIONS[persona], version)
        for persona, filename in INSTRUCTION_FILES.items()
    }
    motd = _load_text(root, MOTD_FILE, DEFAULT_MOTD, version)

    return BotContent(
        catalogue=catalogue,
        instructions=MappingProxyType(instructions),
        motd=motd,
    )


def reload_content(store: ContentStore, directory: str | Path, changed_file: str | None = None) -> bool:
    """Reload ``store`` from ``directory``; keep the old content on failure."""

    try:
        content = load_content(directory)
    except Exception:
        logger.exception("Failed to reload config after change to %s", changed_file or directory)
        return False

    store.replace(content)
    logger.info("Reloaded config due to change in %s", changed_file or directory)
    return True


__all__ = [
    "BotContent",
    "ContentStore",
    "load_content",
    "reload_content",
    "parse_message_list",
    "parse_instructions",
]
