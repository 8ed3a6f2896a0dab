from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./heartkemy.db"
    project_name: str = "HeartKemy API"
    api_prefix: str = "/api"

    # Debug flag and root log level (e.g. "INFO", "DEBUG")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = "INFO"

    # Identity used when a request carries no X-User-Id header (no auth enforcement)
    demo_user_id: str = "user-demo-1"

    # Fallback location when the client has no geolocation (Seoul City Hall)
    default_latitude: float = 37.5665
    default_longitude: float = 126.9780

    # Letter delivery: letters "fly" at a constant speed
    letter_speed_kmh: float = 20.0
    letter_min_content_length: int = 20

    # Posts / letters may carry at most this many emotion keywords
    max_emotion_keywords: int = 3
    # Characters of content used as post preview when the client sends none
    preview_length: int = 50

    posts_default_limit: int = 50
    posts_max_limit: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
