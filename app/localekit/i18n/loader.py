"""Dictionary loading interface and implementations.

Defines the contract for loading one locale's dictionary from storage and
provides JSON and YAML file loaders for a ``<locale>.<ext>`` directory layout.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Tuple

import yaml

from localekit.i18n.exceptions import DictionaryDecodeError
from localekit.i18n.models import Dictionary, validate_dictionary
from localekit.logging import get_module_logger

logger = get_module_logger()


class DictionaryLoader(ABC):
    """Abstract base for dictionary loaders.

    Implementations define where a locale's dictionary lives and how its
    bytes are decoded.
    """

    @abstractmethod
    def load(self, locale: str) -> Dictionary:
        """Load the dictionary for a specific locale.

        Args:
            locale: Locale identifier (e.g., "en_US").

        Returns:
            Dictionary mapping section -> key -> template.

        Raises:
            OSError: If the locale's source cannot be read.
            DictionaryDecodeError: If the content is malformed.
        """
        pass

    @abstractmethod
    def discover_locales(self) -> List[str]:
        """List the locales this loader can provide.

        Returns:
            Locale identifiers, sorted.
        """
        pass


class FileDictionaryLoader(DictionaryLoader):
    """Loader for one-file-per-locale directories.

    Subclasses set ``extensions`` and implement ``decode``. The first
    extension is used when building a locale's file path; all of them are
    considered during discovery.

    Attributes:
        translations_dir: Directory containing the dictionary files.
    """

    extensions: Tuple[str, ...] = ()

    def __init__(self, translations_dir: Path):
        self.translations_dir = Path(translations_dir)

    def path_for(self, locale: str) -> Path:
        """Return the file path for a locale, preferring an existing file."""
        for extension in self.extensions:
            candidate = self.translations_dir / f"{locale}.{extension}"
            if candidate.exists():
                return candidate
        return self.translations_dir / f"{locale}.{self.extensions[0]}"

    def load(self, locale: str) -> Dictionary:
        path = self.path_for(locale)
        with open(path, "rb") as f:
            raw = f.read()

        dictionary = validate_dictionary(self.decode(raw, path), source=str(path))
        logger.info(
            "loaded_dictionary",
            locale=locale,
            file=str(path),
            section_count=len(dictionary),
        )
        return dictionary

    def discover_locales(self) -> List[str]:
        """Return file stems of all dictionary files in the directory.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """
        if not self.translations_dir.is_dir():
            raise FileNotFoundError(
                f"Translations directory not found: {self.translations_dir}"
            )

        locales = set()
        for entry in self.translations_dir.iterdir():
            if not entry.is_file():
                continue
            suffix = entry.suffix.lstrip(".")
            if suffix in self.extensions and entry.stem:
                locales.add(entry.stem)

        logger.debug(
            "discovered_locales",
            translations_dir=str(self.translations_dir),
            locales=sorted(locales),
        )
        return sorted(locales)

    @abstractmethod
    def decode(self, raw: bytes, path: Path):
        """Decode raw file content into Python data.

        Raises:
            DictionaryDecodeError: If the bytes cannot be decoded.
        """
        pass


class JSONDictionaryLoader(FileDictionaryLoader):
    """Loader for ``<locale>.json`` files."""

    extensions = ("json",)

    def decode(self, raw: bytes, path: Path):
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise DictionaryDecodeError(f"Failed to parse {path}: {e}") from e


class YAMLDictionaryLoader(FileDictionaryLoader):
    """Loader for ``<locale>.yml`` or ``<locale>.yaml`` files.

    Expected format:

        form.login:
          title: Hello, {name}
    """

    extensions = ("yml", "yaml")

    def decode(self, raw: bytes, path: Path):
        try:
            return yaml.safe_load(raw.decode("utf-8"))
        except (UnicodeDecodeError, yaml.YAMLError) as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise DictionaryDecodeError(f"Failed to parse {path}: {e}") from e


def create_loader(translations_dir: Path, file_format: str = "json") -> DictionaryLoader:
    """Return the loader for a file format name ("json" or "yaml").

    Raises:
        ValueError: If the format is unknown.
    """
    loaders = {
        "json": JSONDictionaryLoader,
        "yaml": YAMLDictionaryLoader,
    }
    try:
        loader_class = loaders[file_format]
    except KeyError as e:
        raise ValueError(f"Unsupported dictionary format: {file_format}") from e
    return loader_class(translations_dir)
