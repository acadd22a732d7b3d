from pydantic_settings import BaseSettings, SettingsConfigDict


# ================== SETTINGS ==================
class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./parking.db"
    LOG_LEVEL: str = "INFO"
    SEED_ON_STARTUP: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="allow"
    )


settings = Settings()
