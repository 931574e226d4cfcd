from pathlib import Path

import pytest

from consts import load_site_config
from icons import IconLibrary, IconRegistry, initialize_icon_rendering

FAKE_SVGS = {
    "brands/github.svg": ("0 0 496 512", "M165.9 397.4c0 2-2.3 3.6-5.2 3.6z"),
    "brands/linkedin.svg": ("0 0 448 512", "M416 32H31.9C14.3 32 0 46.5 0 64.3z"),
    "solid/magnifying-glass.svg": ("0 0 512 512", "M416 208c0 45.9-14.9 88.3-40 122.7z"),
    "solid/file-arrow-down.svg": ("0 0 384 512", "M64 0C28.7 0 0 28.7 0 64V448z"),
}

FAKE_CSS = ".svg-inline--fa { display: inline-block; height: 1em; overflow: visible; }\n"


def write_icon_assets(root):
    """Lay out a minimal copy of the fontawesomefree static tree."""
    root = Path(root)
    for rel_path, (viewbox, d) in FAKE_SVGS.items():
        svg = root / "svgs" / rel_path
        svg.parent.mkdir(parents=True, exist_ok=True)
        svg.write_text(
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}">'
            f"<!--! Font Awesome Free --><path d=\"{d}\"/></svg>"
        )
    css = root / "css" / "svg-with-js.css"
    css.parent.mkdir(parents=True, exist_ok=True)
    css.write_text(FAKE_CSS)
    return root


@pytest.fixture
def icon_assets(tmp_path):
    return write_icon_assets(tmp_path / "fontawesomefree")


@pytest.fixture
def icon_registry(icon_assets):
    return IconRegistry(icon_assets / "svgs", icon_assets / "css" / "svg-with-js.css")


@pytest.fixture
def icons(icon_registry):
    return initialize_icon_rendering(IconLibrary(icon_registry), auto_add_css=False)


@pytest.fixture
def config():
    return load_site_config()
