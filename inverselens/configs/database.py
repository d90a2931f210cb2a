"""
Database configuration settings.

Manages PostgreSQL connection parameters for the relational record store.
A full DATABASE_URL, when present, takes precedence over the composed one.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import make_url

from inverselens.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    url: str | None = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="Full connection string; overrides host/port/user/password/db",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="inverselens", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="prefer", description="SSL mode for managed Postgres")

    @property
    def async_database_url(self) -> str:
        """
        Construct async PostgreSQL connection URL.

        Plain postgres:// and postgresql:// schemes from DATABASE_URL are
        rewritten to the asyncpg driver. asyncpg has no libpq ``sslmode`` or
        ``channel_binding`` arguments, so ``sslmode`` is passed on as ``ssl``
        and ``channel_binding`` is dropped.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        if self.url:
            url = make_url(self.url)
            if url.drivername in ("postgres", "postgresql"):
                url = url.set(drivername="postgresql+asyncpg")
            if url.drivername != "postgresql+asyncpg":
                return self.url

            sslmode = url.query.get("sslmode")
            url = url.difference_update_query(["sslmode", "channel_binding"])
            if sslmode and "ssl" not in url.query:
                url = url.update_query_dict({"ssl": sslmode})
            return url.render_as_string(hide_password=False)

        ssl_param = "?ssl=require" if self.sslmode == "require" else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}{ssl_param}"
        )
