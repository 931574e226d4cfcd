from datetime import date
from pathlib import Path

import pytest

from posts import PostError, load_posts, parse_front_matter, read_post, recent_posts


def write_post(directory, name, front_matter, body="Body text.\n"):
    path = directory / name
    path.write_text(f"---\n{front_matter}\n---\n\n{body}")
    return path


def test_load_posts_newest_first(tmp_path):
    write_post(tmp_path, "older.md", "title: Older\ndate: 2024-03-02")
    write_post(tmp_path, "newer.md", "title: Newer\ndescription: Fresh\ndate: 2025-01-22")
    posts = load_posts(tmp_path)
    assert [p.slug for p in posts] == ["newer", "older"]
    assert posts[0].description == "Fresh"
    assert posts[0].date == date(2025, 1, 22)
    assert posts[1].description == ""


def test_drafts_are_skipped(tmp_path):
    write_post(tmp_path, "wip.md", "title: WIP\ndate: 2025-02-01\ndraft: true")
    write_post(tmp_path, "done.md", "title: Done\ndate: 2025-01-01")
    assert [p.slug for p in load_posts(tmp_path)] == ["done"]


def test_missing_directory_has_no_posts(tmp_path):
    assert load_posts(tmp_path / "nope") == []


def test_section_controls_url(tmp_path):
    write_post(tmp_path, "Site Builder.md", "title: Site builder\ndate: 2025-01-01")
    (project,) = load_posts(tmp_path, section="projects")
    assert project.slug == "site-builder"
    assert project.url == "/projects/site-builder/"


@pytest.mark.parametrize("front_matter", ["date: 2025-01-01", "title: No date", "title: ''\ndate: 2025-01-01"])
def test_required_fields(tmp_path, front_matter):
    path = write_post(tmp_path, "post.md", front_matter)
    with pytest.raises(PostError, match="missing"):
        read_post(path)


def test_bad_date(tmp_path):
    path = write_post(tmp_path, "post.md", "title: T\ndate: last tuesday")
    with pytest.raises(PostError, match="YYYY-MM-DD"):
        read_post(path)


def test_quoted_date_is_parsed(tmp_path):
    path = write_post(tmp_path, "post.md", "title: T\ndate: '2024-09-05'")
    assert read_post(path).date == date(2024, 9, 5)


def test_no_front_matter():
    with pytest.raises(PostError, match="no front matter"):
        parse_front_matter("# Just a heading\n")


def test_invalid_yaml():
    with pytest.raises(PostError, match="invalid front matter"):
        parse_front_matter("---\ntitle: [unclosed\n---\n")


def test_front_matter_must_be_mapping():
    with pytest.raises(PostError, match="mapping"):
        parse_front_matter("---\n- a\n- b\n---\n")


def test_recent_posts_limit(tmp_path):
    posts = ["a", "b", "c"]
    assert recent_posts(posts, 2) == ["a", "b"]
    assert recent_posts(posts, 10) == ["a", "b", "c"]
    assert recent_posts(posts, 0) == []


def test_bundled_posts_parse():
    content = Path(__file__).resolve().parent.parent / "content" / "blog"
    posts = load_posts(content)
    assert len(posts) == 4
    assert posts[0].slug == "oauth-plugin-unit-tests"


@pytest.mark.parametrize("value", ["'false'", "'no'", "0", "yes please"])
def test_draft_must_be_boolean(tmp_path, value):
    write_post(tmp_path, "post.md", f"title: T\ndate: 2025-01-01\ndraft: {value}")
    with pytest.raises(PostError, match="'draft' must be true or false"):
        load_posts(tmp_path)


def test_draft_false_is_published(tmp_path):
    write_post(tmp_path, "post.md", "title: T\ndate: 2025-01-01\ndraft: false")
    assert [p.slug for p in load_posts(tmp_path)] == ["post"]
