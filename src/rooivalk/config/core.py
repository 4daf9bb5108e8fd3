import logging
import os
from pathlib import Path

from .loader import section

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"


def _optional_id(raw) -> int | None:
    text = str(raw or "").strip()
    return int(text) if text else None


class Core:
    def __init__(self, config: dict | None = None) -> None:
        discord_cfg = section(config, "discord")
        openai_cfg = section(config, "openai")
        schedule_cfg = section(config, "schedule")

        token_env = str(discord_cfg.get("token_env", "DISCORD_TOKEN"))
        openai_env = str(openai_cfg.get("api_key_env", "OPENAI_API_KEY"))

        self.DISCORD_TOKEN: str | None = os.getenv(token_env)
        self.OPENAI_API_KEY: str | None = os.getenv(openai_env)

        self.DISCORD_APP_ID: int | None = _optional_id(discord_cfg.get("app_id") or os.getenv("DISCORD_APP_ID"))
        self.DISCORD_GUILD_ID: int | None = _optional_id(discord_cfg.get("guild_id") or os.getenv("DISCORD_GUILD_ID"))
        self.DISCORD_STARTUP_CHANNEL_ID: int | None = _optional_id(
            discord_cfg.get("startup_channel_id") or os.getenv("DISCORD_STARTUP_CHANNEL_ID")
        )
        self.DISCORD_LEARN_CHANNEL_ID: int | None = _optional_id(
            discord_cfg.get("learn_channel_id") or os.getenv("DISCORD_LEARN_CHANNEL_ID")
        )
        self.TRIGGER_EMOJI: str = str(discord_cfg.get("trigger_emoji") or os.getenv("DISCORD_EMOJI", "rooivalk"))

        self.OPENAI_MODEL: str = str(openai_cfg.get("model") or os.getenv("OPENAI_MODEL", "gpt-4.1-mini"))
        self.OPENAI_IMAGE_MODEL: str = str(
            openai_cfg.get("image_model") or os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1")
        )

        self.MOTD_CRON: str = str(schedule_cfg.get("motd_cron") or os.getenv("ROOIVALK_MOTD_CRON", "0 8 * * *"))
        self.CONFIG_DIR: str = str(
            section(config).get("config_dir") or os.getenv("ROOIVALK_CONFIG_DIR", str(_DEFAULT_CONFIG_DIR))
        )

        required = [
            ("DISCORD_TOKEN", self.DISCORD_TOKEN),
            ("DISCORD_GUILD_ID", self.DISCORD_GUILD_ID),
            ("OPENAI_API_KEY", self.OPENAI_API_KEY),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        if self.DISCORD_STARTUP_CHANNEL_ID is None:
            logger.info("DISCORD_STARTUP_CHANNEL_ID not set; greetings and MOTD are disabled.")
