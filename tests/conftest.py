import os, sys
import warnings
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# Add src/ to sys.path for imports
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "tests"))

# Ensure required environment variables for rooivalk.config.core
os.environ.setdefault("DISCORD_TOKEN", "test-token")
os.environ.setdefault("DISCORD_GUILD_ID", "7")
os.environ.setdefault("OPENAI_API_KEY", "test-openai")
os.environ.setdefault("DISCORD_STARTUP_CHANNEL_ID", "500")
os.environ.setdefault("DISCORD_LEARN_CHANNEL_ID", "600")
os.environ.setdefault("ROOIVALK_CONFIG_DIR", str(ROOT / "config"))
os.environ.setdefault("USE_LOCAL", "0")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings(
    "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
)
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)


def pytest_configure(config):
    warnings.filterwarnings(
        "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
    )
    warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)
