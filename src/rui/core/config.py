"""Configuration Management."""

from functools import lru_cache
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Element ids of the bootstrap page
ROOT_VIEW_ID = "ruiRootView"
POPUP_LAYER_ID = "ruiPopupLayer"


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="RUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Server
    host: str = Field(default="localhost", description="HTTP listen host")
    port: int = Field(default=8080, gt=0, lt=65536, description="HTTP listen port")
    socket_path: str = Field(default="/ws", description="WebSocket endpoint path")

    # Application page
    title: str = Field(default="RUI", description="Page title")
    title_icon: str = Field(default="", description="Page icon resource name")

    # Session
    socket_auto_close: int = Field(
        default=0, ge=0, description="Seconds a paused session survives (0 = never close)"
    )
    getter_timeout: float = Field(
        default=5.0, gt=0.0, description="Browser getter-RPC answer timeout (seconds)"
    )
    default_language: str = Field(default="en", description="Language used before sessionInfo")

    # Resources
    resources_path: str = Field(default="", description="Directory with themes, strings, images")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Metrics
    enable_metrics: bool = Field(default=True, description="Expose /metrics endpoint")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class AppParams(BaseModel):
    """Parameters of one served application."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = ""
    title_icon: str = ""
    socket_auto_close: int = Field(default=0, ge=0)
    getter_timeout: float = Field(default=5.0, gt=0.0)
    content_factory: Optional[Callable[[], Any]] = None

    @classmethod
    def from_settings(
        cls, content_factory: Optional[Callable[[], Any]] = None, settings: Optional[Settings] = None
    ) -> "AppParams":
        settings = settings or get_settings()
        return cls(
            title=settings.title,
            title_icon=settings.title_icon,
            socket_auto_close=settings.socket_auto_close,
            getter_timeout=settings.getter_timeout,
            content_factory=content_factory,
        )
