"""
fonts.py - Font specifiers, the built-in font catalog and font loading

A font is given either as "file:<path>" (a FIGlet font on disk) or as the
bare name of a font bundled with pyfiglet.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
import io
import logging
from pathlib import Path
import zipfile

from pyfiglet import FigletFont, FontError

from springbanner.errors import CatalogUnavailableError, FontNotFoundError

logger = logging.getLogger(__name__)

FONT_PREFIX_FILE = "file:"
FONT_SUFFIX = ".flf"
FONT_PACKAGE = "pyfiglet.fonts"


@dataclass(frozen=True)
class ExternalFontFile:
    path: Path


@dataclass(frozen=True)
class BuiltInFont:
    name: str


FontSpec = ExternalFontFile | BuiltInFont


def parse_font_spec(value: str) -> FontSpec:
    """Split a font string into a file reference or a built-in name."""
    if value.startswith(FONT_PREFIX_FILE):
        return ExternalFontFile(Path(value[len(FONT_PREFIX_FILE):]))
    return BuiltInFont(value)


class _LoadedFont(FigletFont):
    """FigletFont built from bytes that were already read."""

    def __init__(self, name: str, data: bytes):
        self._raw = data
        super().__init__(font=name)

    def preloadFont(self, font):
        data = self._raw
        # pyfiglet ships some fonts zip-packed, the font is the first member
        if zipfile.is_zipfile(io.BytesIO(data)):
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                data = archive.read(archive.namelist()[0])
        return data.decode("utf-8", "replace")


def load_font(name: str, data: bytes) -> FigletFont:
    """Parse FIGlet font data. Raises pyfiglet.FontError on bad input."""
    return _LoadedFont(name, data)


class FontCatalog:
    """
    Names of the fonts bundled in a resource package.

    The manifest is collected once when the catalog is created and belongs
    to this instance only.
    """

    def __init__(self, package: str = FONT_PACKAGE, suffix: str = FONT_SUFFIX):
        self.package = package
        self.suffix = suffix
        self._names = self._collect()

    def _collect(self) -> frozenset[str]:
        try:
            entries = list(resources.files(self.package).iterdir())
        except (ImportError, OSError, TypeError) as e:
            raise CatalogUnavailableError("Cannot collect names of built-in fonts.") from e

        names = frozenset(
            entry.name[: -len(self.suffix)]
            for entry in entries
            if entry.is_file() and entry.name.endswith(self.suffix)
        )
        logger.debug("Found %d built-in fonts in %s", len(names), self.package)
        return names

    def list_names(self) -> frozenset[str]:
        return self._names

    def sorted_names(self) -> list[str]:
        return sorted(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def open_font(self, name: str) -> bytes:
        return resources.files(self.package).joinpath(name + self.suffix).read_bytes()


class FontResolver:
    """Turns a FontSpec into a loaded FigletFont."""

    def __init__(self, catalog: FontCatalog | None = None):
        self._catalog = catalog

    @property
    def catalog(self) -> FontCatalog:
        # Only built-in lookups need the catalog
        if self._catalog is None:
            self._catalog = FontCatalog()
        return self._catalog

    def resolve(self, spec: FontSpec) -> FigletFont:
        if isinstance(spec, ExternalFontFile):
            return self._load_file(spec.path)
        return self._load_builtin(spec.name)

    def _load_file(self, path: Path) -> FigletFont:
        logger.debug("Loading font file %s", path)
        try:
            return load_font(path.stem, path.read_bytes())
        except (OSError, FontError) as e:
            raise FontNotFoundError(
                f"Font file {path} does not exist or is not a valid FIGlet font."
            ) from e

    def _load_builtin(self, name: str) -> FigletFont:
        catalog = self.catalog
        if name not in catalog:
            raise self._missing_font(name)
        logger.debug("Loading built-in font %s", name)
        try:
            return load_font(name, catalog.open_font(name))
        except (OSError, FontError) as e:
            raise self._missing_font(name) from e

    def _missing_font(self, name: str) -> FontNotFoundError:
        fonts = ", ".join(self.catalog.sorted_names())
        return FontNotFoundError(
            f'The built-in font "{name}" does not exist. Available fonts: {fonts}.'
        )
