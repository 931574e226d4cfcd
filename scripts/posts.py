"""simeonat.github.io — Blog post metadata.

Reads the YAML front matter of each Markdown post so the listing pages can
link to it. Post bodies are left to the site generator.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

import yaml

from seo_core import slugify

FRONT_MATTER_RE = re.compile(r"^\s*---\s*\n(.*?)\n---\s*(?:\n|$)", re.S)


class PostError(ValueError):
    """Raised for a post whose front matter is missing or incomplete."""


@dataclass(frozen=True)
class Post:
    slug: str
    title: str
    description: str
    date: date
    draft: bool = False
    section: str = "blog"

    @property
    def url(self):
        return f"/{self.section}/{self.slug}/"


def parse_front_matter(text, source="<string>"):
    """Return the front matter mapping of a Markdown document."""
    match = FRONT_MATTER_RE.match(text)
    if not match:
        raise PostError(f"{source}: no front matter block")
    try:
        data = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise PostError(f"{source}: invalid front matter: {e}") from e
    if not isinstance(data, dict):
        raise PostError(f"{source}: front matter must be a mapping")
    return data


def _coerce_date(value, source):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            pass
    raise PostError(f"{source}: date {value!r} is not YYYY-MM-DD")


def read_post(path, section="blog"):
    path = Path(path)
    meta = parse_front_matter(path.read_text(encoding="utf-8"), source=path.name)

    for required in ("title", "date"):
        if not meta.get(required):
            raise PostError(f"{path.name}: missing '{required}'")

    draft = meta.get("draft", False)
    if not isinstance(draft, bool):
        raise PostError(f"{path.name}: 'draft' must be true or false")

    return Post(
        slug=slugify(path.stem),
        title=str(meta["title"]),
        description=str(meta.get("description") or ""),
        date=_coerce_date(meta["date"], path.name),
        draft=draft,
        section=section,
    )


def load_posts(content_dir, section="blog"):
    """Load published entries from a directory of *.md files, newest first."""
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        return []
    posts = [read_post(p, section) for p in sorted(content_dir.glob("*.md"))]
    published = [p for p in posts if not p.draft]
    return sorted(published, key=lambda p: (p.date, p.slug), reverse=True)


def recent_posts(posts, limit):
    if limit <= 0:
        return []
    return list(posts[:limit])
