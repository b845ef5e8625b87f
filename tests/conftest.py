from pathlib import Path

import pytest

from springbanner.config import BannerConfig
from springbanner.fonts import FontCatalog


@pytest.fixture(scope="session")
def catalog() -> FontCatalog:
    return FontCatalog()


@pytest.fixture
def config(tmp_path: Path) -> BannerConfig:
    return BannerConfig(
        text="A",
        output_directory=tmp_path / "out",
        include_info=False,
    )


@pytest.fixture
def font_file(tmp_path: Path, catalog: FontCatalog) -> Path:
    path = tmp_path / "fonts" / "mine.flf"
    path.parent.mkdir()
    path.write_bytes(catalog.open_font("standard"))
    return path
