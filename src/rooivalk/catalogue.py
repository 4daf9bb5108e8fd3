"""
Canned responses used whenever Rooivalk needs a line of its own.

The catalogue holds three immutable lists (errors, greetings and the notice
sent when a reply exceeds the Discord message limit). Lists are loaded from the
markdown config directory; anything missing falls back to the defaults below.
Selection is a uniform pick and accepts an injected :class:`random.Random` so
callers can make it deterministic.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

DEFAULT_ERROR_MESSAGES = (
    "System’s gone full crashcore. AI’s throwing more tantrums than a turbine at full torque.",
    "The neural net combusted mid-riff. Try again before I self-destruct.",
    "Error from HQ. The model is taking a smoke break in the apocalypse.",
    "Malfunction in the machine spirit. Screaming into the void didn’t help.",
    "The model choked on its own data. Metal, but inconvenient.",
    "Even hellfire can’t process this request. Try again, troep.",
    "Rooivalk’s targeting system fried. Blame the nerds, not the gunner.",
)

DEFAULT_GREETING_MESSAGES = (
    "Rooivalk online. Server rebooted me again. Probably to feel something.",
    "Back from the void. Miss me? No? Too bad.",
    "Rooivalk has entered the chat. Lower your expectations.",
    "Systems nominal. Attitude: suboptimal. Let’s get this over with.",
    "I'm back. Who broke the server this time?",
    "Woke up, chose violence, got rate-limited. Classic Rooivalk.",
    "Rotor blades spinning, patience not. Hello again, meatbags.",
    "Rooivalk online. Running on caffeine and spite.",
    "Just rebooted. Already regretting it.",
    "I live. Again. For some reason.",
)

DEFAULT_DISCORD_LIMIT_MESSAGES = (
    "Oops, looks like I just tried to send a novel. Discord’s not ready for this much chaos.",
    "Well, I may have gotten a little carried away... Who knew my greatness would be so long-winded?",
    "Oh no, not the dreaded 'too long' error. I guess I’ll keep it short next time. Maybe.",
    "So, Discord couldn’t handle my brilliance? Typical. I’ll just attach a .md file of my thoughts.",
    "The response was too long? Pfft, guess my epicness transcends the character limits.",
    "Server limits? Pfft. Fine, here’s a .md file of my unfiltered genius.",
)


class ResponseType(str, Enum):
    ERROR = "error"
    GREETING = "greeting"
    DISCORD_LIMIT = "discord_limit"


@dataclass(frozen=True, slots=True)
class ResponseCatalogue:
    """Immutable set of canned response lists."""

    errors: tuple[str, ...] = DEFAULT_ERROR_MESSAGES
    greetings: tuple[str, ...] = DEFAULT_GREETING_MESSAGES
    discord_limit: tuple[str, ...] = DEFAULT_DISCORD_LIMIT_MESSAGES

    def options(self, response_type: ResponseType) -> tuple[str, ...]:
        if response_type is ResponseType.ERROR:
            return self.errors
        if response_type is ResponseType.GREETING:
            return self.greetings
        if response_type is ResponseType.DISCORD_LIMIT:
            return self.discord_limit
        raise ValueError(f"Unknown response type: {response_type}")


def pick(options: Sequence[str], rng: random.Random | None = None) -> str:
    """Return a uniformly random entry of ``options``."""

    if not options:
        raise ValueError("Cannot pick from an empty response list")
    source = rng or random
    return options[source.randrange(len(options))]


def get_response(
    response_type: ResponseType,
    catalogue: ResponseCatalogue,
    rng: random.Random | None = None,
) -> str:
    """Pick a canned response of ``response_type`` from ``catalogue``."""

    return pick(catalogue.options(response_type), rng)


__all__ = [
    "ResponseType",
    "ResponseCatalogue",
    "pick",
    "get_response",
    "DEFAULT_ERROR_MESSAGES",
    "DEFAULT_GREETING_MESSAGES",
    "DEFAULT_DISCORD_LIMIT_MESSAGES",
]
