"""simeonat.github.io — Single source of truth for site configuration.

Everything here is literal data. `load_site_config()` turns it into one
frozen `SiteConfig` that gets passed to every renderer.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import urlparse

from icons import FA_GITHUB, FA_LINKEDIN, IconDefinition

BASE_URL = "https://simeonat.github.io"
CSS_VERSION = 1

# Static assets served from the site root
PROFILE_IMAGE = "/profile-pixel-art-upscaled.png"
CV_HREF = "/cv.pdf"


class ConfigError(ValueError):
    """Raised when the compiled-in configuration is incomplete or malformed."""


def _require_text(value, field_name, owner):
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{owner}: '{field_name}' is required")


def _require_count(value, field_name):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"Site: '{field_name}' must be a non-negative integer, got {value!r}")


def _require_url(href, owner):
    parsed = urlparse(href)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"{owner}: href {href!r} is not an absolute http(s) URL")


@dataclass(frozen=True)
class Site:
    title: str
    description: str
    email: str = ""
    num_posts_on_homepage: int = 5
    num_projects_on_homepage: int = 0

    def __post_init__(self):
        _require_count(self.num_posts_on_homepage, "num_posts_on_homepage")
        _require_count(self.num_projects_on_homepage, "num_projects_on_homepage")
        # Presentational fields render as "" rather than failing
        for name in ("title", "description", "email"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")


@dataclass(frozen=True)
class Metadata:
    title: str = ""
    description: str = ""

    def __post_init__(self):
        for name in ("title", "description"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")


@dataclass(frozen=True)
class SocialLink:
    name: str
    href: str
    icon: IconDefinition
    end: bool = False

    def __post_init__(self):
        _require_text(self.name, "name", "SocialLink")
        _require_text(self.href, "href", f"SocialLink {self.name!r}")
        _require_url(self.href, f"SocialLink {self.name!r}")
        if not isinstance(self.icon, IconDefinition):
            raise ConfigError(f"SocialLink {self.name!r}: 'icon' must be an IconDefinition")


@dataclass(frozen=True)
class SiteConfig:
    base_url: str
    site: Site
    pages: MappingProxyType
    socials: tuple = field(default_factory=tuple)

    def __post_init__(self):
        _require_url(self.base_url, "SiteConfig")
        if not isinstance(self.site, Site):
            raise ConfigError("SiteConfig: 'site' must be a Site")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "socials", tuple(self.socials))
        if not isinstance(self.pages, MappingProxyType):
            object.__setattr__(self, "pages", MappingProxyType(dict(self.pages)))
        for key, meta in self.pages.items():
            if not isinstance(meta, Metadata):
                raise ConfigError(f"SiteConfig: page {key!r} must be Metadata")
        validate_social_groups(self.socials)

    def page(self, key):
        """Metadata for a logical page; unknown keys render as empty text."""
        return self.pages.get(key, Metadata())

    def url(self, path="/"):
        return f"{self.base_url}{path}"


def validate_social_groups(socials):
    """Check that every visual group of socials is closed by exactly one `end` entry.

    Groups are the runs of links up to and including an `end=True` link, so the
    only way to break the rule is to leave the final group open.
    """
    if socials and not socials[-1].end:
        raise ConfigError(
            f"SocialLink {socials[-1].name!r} is last in the list but is not marked end=True"
        )


def social_groups(socials):
    """Split socials into display groups, preserving authored order."""
    groups, current = [], []
    for link in socials:
        current.append(link)
        if link.end:
            groups.append(tuple(current))
            current = []
    if current:
        groups.append(tuple(current))
    return groups


def build_pages(pairs):
    """Build the page metadata table from ordered (key, Metadata) pairs.

    A key defined twice is an authoring mistake, not an override.
    """
    pages = {}
    for key, meta in pairs:
        if key in pages:
            raise ConfigError(f"Page metadata {key!r} is defined more than once")
        pages[key] = meta
    return MappingProxyType(pages)


# ─── Compiled-in values ───

SITE = Site(
    title="Simeon Tran",
    description="Computer Science Graduate Student",
    email="",
    num_posts_on_homepage=5,
    num_projects_on_homepage=0,
)

HOME = Metadata(
    title="Home",
    description="My personal website and blog.",
)

BLOG = Metadata(
    title="Blog",
    description="Blog posts on research projects that I am currently working on.",
)

PROJECTS = Metadata(
    title="Projects",
    description="Projects that I am proud of.",
)

SOCIALS = (
    SocialLink(
        name="GitHub",
        href="https://github.com/simeonat",
        icon=FA_GITHUB,
        end=False,
    ),
    SocialLink(
        name="LinkedIn",
        href="https://www.linkedin.com/in/simeon-tran/",
        icon=FA_LINKEDIN,
        end=True,
    ),
)


def load_site_config():
    """Assemble the frozen site configuration. Called once at startup."""
    pages = build_pages([
        ("home", HOME),
        ("blog", BLOG),
        ("projects", PROJECTS),
    ])
    return SiteConfig(base_url=BASE_URL, site=SITE, pages=pages, socials=SOCIALS)
