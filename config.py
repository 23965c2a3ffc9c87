from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    database_url: str = "postgresql://localhost:5432/jobly"
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    cors_origins: list[str] = ["http://localhost:3000"]


settings = Settings()
