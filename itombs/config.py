"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database path settings."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    tree_db_path: str = "data/tree.db"


class CanvasSettings(BaseSettings):
    """Tree canvas sizing and interaction settings."""

    model_config = SettingsConfigDict(env_prefix="CANVAS_")

    mobile_breakpoint: int = 768
    desktop_max_width: int = 1000
    mobile_margin: int = 40
    desktop_height: int = 600
    mobile_height: int = 500
    drag_threshold: float = 5.0


class ServerSettings(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(env_prefix="SERVER_")

    host: str = "0.0.0.0"
    api_port: int = 8000
    ui_port: int = 8080
    api_base_url: str = "http://localhost:8080"
    request_timeout: float = 10.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_placeholder_name: str = "You"
    log_level: str = "INFO"

    database: DatabaseSettings = DatabaseSettings()
    canvas: CanvasSettings = CanvasSettings()
    server: ServerSettings = ServerSettings()


settings = Settings()
