"""simeonat.github.io — Font Awesome icon rendering.

Icons are rendered server-side as inline SVG from the `fontawesomefree`
distribution. The library stylesheet is linked explicitly in <head>, so
automatic CSS injection is switched off once at startup by
`initialize_icon_rendering()`. With injection on, the first icon on a page
drags a <style> block into the body and icons paint huge before shrinking.
"""

import re
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

SVG_NS = "http://www.w3.org/2000/svg"

# Prefix → directory under svgs/
ICON_STYLES = {
    "fab": "brands",
    "fas": "solid",
    "far": "regular",
}

VIEWBOX_RE = re.compile(r'viewBox="([^"]+)"')
PATH_RE = re.compile(r'<path[^>]*\sd="([^"]+)"')


class IconError(Exception):
    """Base class for icon subsystem errors."""


class IconNotFoundError(IconError):
    """The registry has no SVG for the requested icon."""


class IconConfigError(IconError):
    """Icon rendering was configured out of order."""


@dataclass(frozen=True)
class IconDefinition:
    prefix: str
    name: str

    @property
    def style(self):
        try:
            return ICON_STYLES[self.prefix]
        except KeyError:
            raise IconNotFoundError(f"Unknown icon prefix {self.prefix!r}") from None


FA_GITHUB = IconDefinition("fab", "github")
FA_LINKEDIN = IconDefinition("fab", "linkedin")
FA_MAGNIFYING_GLASS = IconDefinition("fas", "magnifying-glass")
FA_FILE_ARROW_DOWN = IconDefinition("fas", "file-arrow-down")


@dataclass
class IconRenderConfig:
    # Upstream default is on; bootstrap turns it off.
    auto_add_css: bool = True


def default_assets_root():
    """Location of the static assets shipped by the fontawesomefree package."""
    return Path(str(resources.files("fontawesomefree"))) / "static" / "fontawesomefree"


class IconRegistry:
    """Lookup of icon SVG data keyed by (prefix, name)."""

    def __init__(self, svg_root=None, stylesheet=None):
        if svg_root is None or stylesheet is None:
            assets = default_assets_root()
            svg_root = svg_root or assets / "svgs"
            stylesheet = stylesheet or assets / "css" / "svg-with-js.css"
        self.svg_root = Path(svg_root)
        self.stylesheet = Path(stylesheet)
        self._cache = {}

    def lookup(self, icon):
        """Return (viewBox, [path data]) for an icon."""
        key = (icon.prefix, icon.name)
        if key in self._cache:
            return self._cache[key]

        svg_path = self.svg_root / icon.style / f"{icon.name}.svg"
        if not svg_path.is_file():
            raise IconNotFoundError(f"No SVG for {icon.prefix} {icon.name} at {svg_path}")

        source = svg_path.read_text(encoding="utf-8")
        viewbox = VIEWBOX_RE.search(source)
        paths = PATH_RE.findall(source)
        if not viewbox or not paths:
            raise IconNotFoundError(f"Unreadable SVG for {icon.prefix} {icon.name}: {svg_path}")

        self._cache[key] = (viewbox.group(1), paths)
        return self._cache[key]

    def stylesheet_text(self):
        if not self.stylesheet.is_file():
            raise IconNotFoundError(f"Icon stylesheet missing: {self.stylesheet}")
        return self.stylesheet.read_text(encoding="utf-8")


class IconLibrary:
    """Renders icons as inline SVG using a registry and a render config."""

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else IconRegistry()
        self.config = IconRenderConfig()
        self.initialized = False
        self.render_count = 0
        self._css_emitted = False

    def reset_page(self):
        """Start a new page; with auto CSS on, the next icon re-injects the stylesheet."""
        self._css_emitted = False

    def render(self, icon, class_name=""):
        if not self.initialized:
            raise IconConfigError(
                "Icon rendering used before initialize_icon_rendering() was called"
            )

        viewbox, paths = self.registry.lookup(icon)
        classes = f"svg-inline--fa fa-{icon.name}"
        if class_name:
            classes += f" {class_name}"
        path_tags = "".join(f'<path fill="currentColor" d="{d}"></path>' for d in paths)
        svg = (
            f'<svg aria-hidden="true" focusable="false" data-prefix="{icon.prefix}" '
            f'data-icon="{icon.name}" class="{classes}" role="img" '
            f'xmlns="{SVG_NS}" viewBox="{viewbox}">{path_tags}</svg>'
        )

        self.render_count += 1
        if self.config.auto_add_css and not self._css_emitted:
            self._css_emitted = True
            return f"<style>{self.registry.stylesheet_text()}</style>{svg}"
        return svg


def initialize_icon_rendering(library, auto_add_css=False):
    """One-time global setup of the icon library, before any icon is rendered.

    Re-running it before the first render is harmless. Each build process
    performs its own call.
    """
    if library.render_count:
        raise IconConfigError(
            f"initialize_icon_rendering() called after {library.render_count} icon(s) were rendered"
        )
    library.config.auto_add_css = auto_add_css
    library.initialized = True
    return library
