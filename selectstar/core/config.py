"""
Runtime settings for selectstar.

Read from ``SELECTSTAR_*`` environment variables (or a ``.env`` file).
None of them can change the ``$n`` placeholder syntax.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SELECTSTAR_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Default separator for list_() / items()
    LIST_SEPARATOR: str = ", "
    # Default separator for identifiers()
    IDENTIFIER_SEPARATOR: str = ", "
    # sql() dedents the final text when enabled
    DEDENT: bool = True


settings = Settings()
