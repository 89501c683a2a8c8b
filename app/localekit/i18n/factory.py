"""Factory functions for creating i18n components.

Builds registries from the application settings.
"""

from pathlib import Path
from typing import Optional

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings
from localekit.i18n.exceptions import ConfigurationError
from localekit.i18n.loader import create_loader
from localekit.i18n.registry import TranslatorRegistry
from localekit.logging import get_module_logger

logger = get_module_logger()


def create_registry(
    settings: Optional[Settings] = None,
    translations_dir: Optional[Path] = None,
    registry: Optional[TranslatorRegistry] = None,
) -> TranslatorRegistry:
    """Create and initialize a TranslatorRegistry from settings.

    Args:
        settings: Settings to read ``i18n`` options from (default: module settings).
        translations_dir: Overrides ``settings.i18n.translations_dir``.
        registry: Registry to initialize instead of a new one (e.g. the
            process-wide registry from ``get_registry()``).

    Returns:
        TranslatorRegistry: Initialized registry

    Raises:
        ConfigurationError: If no translations directory is configured, or
            the dictionaries do not include the default locale.
        OSError: If dictionary files cannot be read.
        DictionaryDecodeError: If a dictionary file is malformed.

    Usage:
        # Use I18N_* environment settings
        registry = create_registry()

        # Custom translations directory
        registry = create_registry(translations_dir=Path("/srv/locales"))
    """
    i18n_settings = (settings or default_settings).i18n
    translations_dir = translations_dir or i18n_settings.translations_dir
    if translations_dir is None:
        raise ConfigurationError("I18N_TRANSLATIONS_DIR is not configured")

    loader = create_loader(Path(translations_dir), i18n_settings.file_format)
    registry = registry or TranslatorRegistry()
    registry.initialize_from_directory(
        i18n_settings.default_locale,
        Path(translations_dir),
        locales=i18n_settings.locales or None,
        loader=loader,
    )

    logger.info(
        "registry_created",
        translations_dir=str(translations_dir),
        file_format=i18n_settings.file_format,
        locale_count=len(registry.available_locales()),
    )
    return registry
