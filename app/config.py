from pydantic_settings import BaseSettings
from typing import Optional
from urllib.parse import quote_plus

class Settings(BaseSettings):
    env: str = "local"

    postgres_user: Optional[str] = None
    postgres_password: Optional[str] = None
    postgres_db: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    # used when no postgres credentials are configured
    sqlite_path: str = "ecommerce.db"

    secret_key: str = "not-so-secret"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    log_level: str = "INFO"

    @property
    def database_url(self):
        if not self.postgres_user:
            return f"sqlite:///{self.sqlite_path}"

        encoded_password = quote_plus(self.postgres_password or "")
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
