"""Package settings and configuration.

Settings are loaded from environment variables (or a ``.env`` file) with
defaults suitable for local development against SQLite.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ormtypes.types.array import ElementKind


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Database configuration
    database_url: str = Field(default="sqlite:///./ormtypes.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Logging
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # Element kind used by ArrayType columns declared without one
    default_array_kind: ElementKind = Field(
        default=ElementKind.INT64,
        alias="ORMTYPES_DEFAULT_ARRAY_KIND",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides.

        Returns:
            The test database URL when testing mode is enabled, otherwise the
            regular one.
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()
