"""localekit configuration settings."""

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field

from localekit.configuration.base import LocalekitSettings


class I18nSettings(LocalekitSettings):
    """Dictionary loading configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a requested one is unknown (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding one dictionary file per locale
        I18N_LOCALES: JSON list of locales to load (default: every file found)
        I18N_FILE_FORMAT: Dictionary file format - 'json' or 'yaml'

    Example:
        ```python
        from localekit.configuration import settings

        if settings.i18n.translations_dir is not None:
            registry = create_registry(settings)
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when the requested locale has no dictionary",
    )
    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory containing <locale>.<ext> dictionary files",
    )
    locales: List[str] = Field(
        default_factory=list,
        alias="I18N_LOCALES",
        description="Locales to load; empty means discover from the directory",
    )
    file_format: Literal["json", "yaml"] = Field(
        default="json",
        alias="I18N_FILE_FORMAT",
        description="Dictionary file format",
    )


class Settings(LocalekitSettings):
    """localekit configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)
