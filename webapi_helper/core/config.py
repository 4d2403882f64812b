"""Library configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Search and request helper settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Number-to-string casts
    MAX_INT_DIGITS: int = Field(
        default=11,
        gt=0,
        description="Maximum length of a 32-bit integer as text, sign included",
    )
    MAX_LONG_DIGITS: int = Field(
        default=19,
        gt=0,
        description="Maximum number of digits a 64-bit integer can have",
    )
    MAX_DECIMAL_DIGITS: int = Field(
        default=20,
        gt=0,
        description=(
            "Maximum number of digits matched for decimals. Decimals support 29 digits, "
            "20 is enough for the values we search on."
        ),
    )
    MAX_DOUBLE_DIGITS: int = Field(
        default=30,
        gt=0,
        description="Maximum length of a double as text, exponent and sign included",
    )

    # Date search terms that are not ISO 8601, tried in order
    SEARCH_DATE_FORMATS: list[str] = Field(
        default=[
            "%m/%d/%Y",
            "%m/%d/%Y %H:%M",
            "%m/%d/%Y %H:%M:%S",
            "%m/%d/%Y %I:%M %p",
            "%m/%d/%Y %I:%M:%S %p",
            "%Y/%m/%d",
            "%Y/%m/%d %H:%M",
            "%Y/%m/%d %H:%M:%S",
            "%B %d, %Y",
            "%b %d, %Y",
            "%d %B %Y",
            "%d %b %Y",
        ]
    )

    # Request bodies
    FORM_BODY_ENCODING: str = Field(default="utf-8")


# Global settings instance
settings = Settings()
