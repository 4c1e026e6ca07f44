from typing import Any, Dict, List

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    SHUTDOWN_TIMEOUT_SECONDS: int = 10

    # database
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "expense-api"
    DB_SSLMODE: str = "disable"

    @computed_field
    @property
    def SQLALCHEMY_DATABASE_URL(self) -> str:
        return URL.create(
            drivername="postgresql",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"sslmode": self.DB_SSLMODE},
        ).render_as_string(hide_password=False)

    ALLOWED_ORIGINS: List[str] = ["*"]

    # POST /expense/ only echoes the parsed body unless this is switched on
    EXPENSE_CREATE_PERSISTS: bool = False

    def log_safe(self) -> Dict[str, Any]:
        """Settings as a dict suitable for logging, with credentials masked."""
        values = self.model_dump(exclude={"SQLALCHEMY_DATABASE_URL"})
        values["DB_PASSWORD"] = "***"
        return values


settings = Settings()  # type: ignore
