"""
Configuration settings for the YouTube insights tool server.
"""

import os
import re
from typing import Dict, Any, Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def clean_api_key(raw: Optional[str]) -> Optional[str]:
    """
    Clean an API key read from the environment or a tool argument.

    Trims whitespace, drops a leading byte order mark and strips quotes
    left over from ``.env`` files.

    Args:
        raw: The key as received

    Returns:
        The cleaned key, or None if nothing usable remains
    """
    if raw is None:
        return None
    cleaned = str(raw).strip().lstrip("\ufeff").strip()
    cleaned = re.sub(r"^[\"']+|[\"']+$", "", cleaned).strip()
    return cleaned or None


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Insights Server"
    APP_VERSION = "1.0.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

    # API keys
    YOUTUBE_API_KEY = clean_api_key(os.getenv("YOUTUBE_API_KEY"))
    MIN_API_KEY_LENGTH = 20

    # Upstream
    YOUTUBE_API_BASE = os.getenv("YOUTUBE_API_BASE", "https://www.googleapis.com/youtube/v3")
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

    # Clients kept alive per credential
    CLIENT_CACHE_SIZE = int(os.getenv("CLIENT_CACHE_SIZE", "32"))

    # Transport
    SERVER_MODE = os.getenv("MCP_SERVER_MODE", "stdio").lower()
    SERVER_HOST = os.getenv("MCP_SERVER_HOST", "0.0.0.0")
    SERVER_PORT = int(os.getenv("MCP_SERVER_PORT", "3000"))
    SSE_PATH = "/sse"
    MESSAGE_PATH = "/message/"
    PUBLIC_URL = os.getenv("PUBLIC_URL", f"http://localhost:{SERVER_PORT}")

    DEBUG = False
    LOG_LEVEL = "INFO"

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from yt_insights.utils.logger import logging

        # Validate required environment variables
        if not cls.YOUTUBE_API_KEY:
            logging.warning("YOUTUBE_API_KEY environment variable not set.")
            logging.warning("Set it in the .env file or pass apiKey with each tool call.")
        elif len(cls.YOUTUBE_API_KEY) < cls.MIN_API_KEY_LENGTH:
            logging.warning(
                f"YOUTUBE_API_KEY looks too short (length {len(cls.YOUTUBE_API_KEY)})"
            )

    @classmethod
    def get_settings(cls) -> Dict[str, Any]:
        """Get the non-secret settings, for diagnostics."""
        return {
            "app_name": cls.APP_NAME,
            "app_version": cls.APP_VERSION,
            "youtube_api_base": cls.YOUTUBE_API_BASE,
            "http_timeout": cls.HTTP_TIMEOUT,
            "client_cache_size": cls.CLIENT_CACHE_SIZE,
            "server_mode": cls.SERVER_MODE,
            "server_host": cls.SERVER_HOST,
            "server_port": cls.SERVER_PORT,
            "has_api_key": bool(cls.YOUTUBE_API_KEY),
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
