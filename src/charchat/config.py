"""
Application configuration.

Defaults live on ``Config``; environment variables (optionally loaded from
a project ``.env`` file) override them. ``CONFIG`` is the shared instance.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_DIR = Path(__file__).resolve().parent.parent.parent

load_dotenv(PROJECT_DIR / ".env")


class Config:
    # Application
    HOST = "0.0.0.0"
    PORT = 8080
    STATIC_DIR = PROJECT_DIR / "static"

    # Catalog (None means the built-in characters)
    CHARACTERS_FILE = None

    # Logging
    LOG_LEVEL = "INFO"
    LOG_FILE = None

    def __init__(self):
        self.reload()

    def reload(self) -> None:
        """Re-read overrides from the environment."""
        self.host = os.getenv("CHARCHAT_HOST", self.HOST)
        self.port = int(os.getenv("CHARCHAT_PORT", str(self.PORT)))
        self.static_dir = Path(os.getenv("CHARCHAT_STATIC_DIR", str(self.STATIC_DIR)))

        characters_file = os.getenv("CHARCHAT_CHARACTERS_FILE", self.CHARACTERS_FILE)
        self.characters_file = Path(characters_file) if characters_file else None

        self.log_level = os.getenv("LOG_LEVEL", self.LOG_LEVEL)
        self.log_file = os.getenv("LOG_FILE", self.LOG_FILE)


CONFIG = Config()
