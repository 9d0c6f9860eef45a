"""locale-engine configuration settings."""

import re
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# BCP 47-ish: primary language subtag plus optional region/script subtags.
LOCALE_CODE_PATTERN = re.compile(r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*$")


class I18nSettings(BaseSettings):
    """Translation engine settings.

    Environment Variables:
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing (default: en)
        I18N_DEFAULT_LOCALE: Locale active when nothing else is selected (default: en)
        I18N_SUPPORTED_LOCALES: JSON list of accepted locale codes (empty = any)
        I18N_DEBUG: Return synthetic "[key] {params}" strings instead of translations
        I18N_TRANSLATIONS_DIR: Directory holding YAML catalogs for the factory
        I18N_PARSE_CACHE_SIZE: Capacity of the markup parse cache (default: 100)

    Invalid values raise pydantic.ValidationError when the settings object is
    built, before any translation call can happen.
    """

    FALLBACK_LOCALE: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")
    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    SUPPORTED_LOCALES: List[str] = Field(
        default_factory=list, alias="I18N_SUPPORTED_LOCALES"
    )
    DEBUG: bool = Field(default=False, alias="I18N_DEBUG")
    TRANSLATIONS_DIR: Optional[str] = Field(default=None, alias="I18N_TRANSLATIONS_DIR")
    PARSE_CACHE_SIZE: int = Field(default=100, alias="I18N_PARSE_CACHE_SIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("FALLBACK_LOCALE", "DEFAULT_LOCALE")
    @classmethod
    def validate_locale_code(cls, v: str) -> str:
        """Reject empty or malformed locale codes."""
        v = v.strip()
        if not LOCALE_CODE_PATTERN.match(v):
            raise ValueError(f"Invalid locale code: {v!r}")
        return v

    @field_validator("SUPPORTED_LOCALES")
    @classmethod
    def validate_supported_locales(cls, v: List[str]) -> List[str]:
        """Every supported locale must be a well-formed code."""
        cleaned = []
        for locale in v:
            locale = locale.strip()
            if not LOCALE_CODE_PATTERN.match(locale):
                raise ValueError(f"Invalid locale code in supported locales: {locale!r}")
            cleaned.append(locale)
        return cleaned

    @field_validator("PARSE_CACHE_SIZE")
    @classmethod
    def validate_cache_size(cls, v: int) -> int:
        """Cache capacity must be positive."""
        if v < 1:
            raise ValueError("I18N_PARSE_CACHE_SIZE must be at least 1")
        return v

    @model_validator(mode="after")
    def check_locales_supported(self) -> "I18nSettings":
        """Fallback and default locales must be in a non-empty supported list."""
        if self.SUPPORTED_LOCALES:
            supported = {locale.lower() for locale in self.SUPPORTED_LOCALES}
            for name in ("FALLBACK_LOCALE", "DEFAULT_LOCALE"):
                value = getattr(self, name)
                if value.lower() not in supported:
                    raise ValueError(
                        f"{name} {value!r} is not listed in I18N_SUPPORTED_LOCALES"
                    )
        return self


class Settings(BaseSettings):
    """locale-engine configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()

        super().__init__(**kwargs)


settings = Settings()
