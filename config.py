from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    secret_key: str
    password_pepper: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    database_url: str = "postgresql://localhost:5432/jobly"
    db_pool_min_size: int = 5
    db_pool_max_size: int = 20
    cors_origins: list[str] = ["http://localhost:3000"]

    @property
    def sqlalchemy_database_url(self) -> str:
        """SQLAlchemy async 엔진용 URL (asyncpg 드라이버)"""
        return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)


settings = Settings()
