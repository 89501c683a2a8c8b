"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Dictionary loading settings class

Example:
    ```python
    from localekit.configuration import settings

    default_locale = settings.i18n.default_locale
    if settings.is_production:
        ...
    ```
"""

from localekit.configuration.settings import I18nSettings, Settings

settings = Settings()

__all__ = ["settings", "Settings", "I18nSettings"]
