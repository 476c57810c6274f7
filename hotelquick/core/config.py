from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "local"
    APP_NAME: str = "HotelQuick API"
    # Comma-separated origins for CORS (e.g. https://hotelquick.example). If empty, uses localhost defaults.
    CORS_ORIGINS: str = ""
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./hotelquick.db"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Render and others give postgres://; SQLAlchemy expects postgresql+psycopg2://."""
        if v and v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[11:]
        return v

    # Every key in the kv store is namespaced with this prefix (hotelquick_hotels, hotelquick_user, ...)
    STORAGE_KEY_PREFIX: str = "hotelquick_"

    # Multiplier for the simulated per-call latency. 0 disables the delay entirely.
    LATENCY_FACTOR: float = 1.0

    @field_validator("LATENCY_FACTOR", mode="after")
    @classmethod
    def non_negative_latency(cls, v: float) -> float:
        if v < 0:
            raise ValueError("LATENCY_FACTOR must be >= 0")
        return v


settings = Settings()
