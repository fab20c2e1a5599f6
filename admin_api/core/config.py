# admin_api/core/config.py

import os
import ssl
from functools import lru_cache
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

ASYNC_DRIVER = "postgresql+asyncpg"

# libpq connection options that asyncpg does not understand. Hosted providers
# put them in the URLs they hand out.
LIBPQ_ONLY_QUERY_PARAMS = ("sslmode", "channel_binding")


class RemoteDatabaseConfig(BaseModel):
    """Full connection URL (hosted Postgres). TLS on, certificate not verified."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["remote"] = "remote"
    url: str

    def sqlalchemy_url(self) -> URL:
        url = self.url
        # Convert postgresql:// to postgresql+asyncpg:// for async support
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                url = ASYNC_DRIVER + "://" + url[len(prefix):]
                break
        return make_url(url).difference_update_query(LIBPQ_ONLY_QUERY_PARAMS)

    def connect_args(self) -> Dict[str, Any]:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return {"ssl": context}

    def describe(self) -> str:
        return "remote PostgreSQL database"


class LocalDatabaseConfig(BaseModel):
    """Discrete host/port/user/password/database fields. TLS off."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["local"] = "local"
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None

    def sqlalchemy_url(self) -> URL:
        return URL.create(
            ASYNC_DRIVER,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    def connect_args(self) -> Dict[str, Any]:
        return {"ssl": False}

    def describe(self) -> str:
        return "local PostgreSQL database"


DatabaseConfig = Annotated[
    Union[RemoteDatabaseConfig, LocalDatabaseConfig],
    Field(discriminator="mode"),
]


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Database settings: DATABASE_URL wins over the discrete DB_* fields
    DATABASE_URL: str = ""
    DB_USER: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_NAME: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_PORT: int = 5432

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_ECHO: bool = False

    # HTTP listener
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore",
    )

    def database_config(self) -> Union[RemoteDatabaseConfig, LocalDatabaseConfig]:
        """Pick the connection mode. Called once at process start."""
        if self.DATABASE_URL:
            return RemoteDatabaseConfig(url=self.DATABASE_URL)
        return LocalDatabaseConfig(
            host=self.DB_HOST,
            port=self.DB_PORT,
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            database=self.DB_NAME,
        )

    def pool_options(self) -> Dict[str, Any]:
        return {
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_timeout": self.DB_POOL_TIMEOUT,
            "pool_recycle": self.DB_POOL_RECYCLE,
            "echo": self.DB_ECHO,
        }

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
