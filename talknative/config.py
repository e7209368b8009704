"""Client configuration with environment variable loading.

Pydantic-based configuration for the chat client and its UI.
The chat endpoint is always supplied from the environment or a .env file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the chat client.

    Attributes:
        api_base_url: Base URL of the chat server (None when unset).
        autoscroll_threshold: Distance from the bottom, in pixels, that still
            counts as "at the bottom" for autoscroll.
        ui_title: Browser window title.
        ui_port: Port the chat UI listens on.
        host: Interface the chat UI and echo server bind to.
    """

    api_base_url: str | None = Field(
        default_factory=lambda: os.getenv("TALKNATIVE_API_BASE_URL") or None,
        description="Chat server base URL, e.g. http://localhost:8080",
    )
    autoscroll_threshold: float = Field(
        default_factory=lambda: os.getenv("AUTOSCROLL_THRESHOLD", "48"),
        validate_default=True,
        ge=0.0,
        description="Pixels from the bottom that still count as scrolled to bottom",
    )
    ui_title: str = Field(
        default="TalkNative",
        description="Title of the chat window",
    )
    ui_port: int = Field(
        default_factory=lambda: os.getenv("PORT", "8080"),
        validate_default=True,
        ge=1,
        le=65535,
        description="Port for the chat UI",
    )
    host: str = Field(
        default_factory=lambda: os.getenv("HOST", "0.0.0.0"),
        description="Bind address",
    )

    @field_validator("api_base_url")
    @classmethod
    def normalize_base_url(cls, v: str | None) -> str | None:
        """Strip whitespace and treat blank values as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If a numeric setting is not a number or is out of range.
    """
    return ClientConfig()
