#!/usr/bin/env python3
"""simeonat.github.io — Static page generator.

Builds the home, blog index and projects pages plus sitemap.xml, and copies
the icon stylesheet next to them. Post pages themselves
(/blog/<slug>/, /projects/<slug>/) are written by the external site
generator that renders Markdown bodies; the listings and sitemap link to
them, so a bare output directory has those links dangling until that
generator runs. This script owns the shared chrome and the listing pages.

Usage: python scripts/generate_site.py [--content content] [--output dist] [--clean]
"""

import argparse
import os
import shutil
import sys
from datetime import datetime
from html import escape
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components import avatar_html, post_list_html, social_links_html
from consts import ConfigError, load_site_config
from icons import IconError, IconLibrary, initialize_icon_rendering
from posts import PostError, load_posts, recent_posts
from seo_core import (
    generate_breadcrumb_schema,
    generate_person_schema,
    generate_website_schema,
    schema_graph,
)
from templates import ICON_STYLESHEET_PATH, get_page_wrapper


# ─── Bootstrap ───


def bootstrap(registry=None):
    """Load configuration and set up icon rendering, in that order.

    Must run before any page is rendered.
    """
    config = load_site_config()
    icons = initialize_icon_rendering(IconLibrary(registry), auto_add_css=False)
    return config, icons


# ─── Pages ───


def build_home_page(config, icons, posts, projects):
    """Generate the landing page (avatar, intro, latest posts, socials)."""
    icons.reset_page()
    site = config.site
    latest = recent_posts(posts, site.num_posts_on_homepage)
    featured = recent_posts(projects, site.num_projects_on_homepage)

    projects_section = ""
    if featured:
        projects_section = f"""
    <section class="home-projects">
        <div class="section-heading">
            <h2>Recent projects</h2>
            <a href="/projects/">See all projects</a>
        </div>
        {post_list_html(featured)}
    </section>"""

    body = f"""
    <section class="home-hero">
        {avatar_html()}
        <h1>{escape(site.title)}</h1>
        <p class="home-intro">{escape(site.description)}</p>
        {social_links_html(config, icons)}
    </section>

    <section class="home-posts">
        <div class="section-heading">
            <h2>Latest posts</h2>
            <a href="/blog/">See all posts</a>
        </div>
        {post_list_html(latest)}
    </section>{projects_section}"""

    schemas = schema_graph(generate_website_schema(config), generate_person_schema(config))
    return get_page_wrapper(config, icons, config.page("home"), "/", body, schemas=schemas)


def build_listing_page(config, icons, key, entries):
    """Generate a section index page (blog or projects)."""
    icons.reset_page()
    page = config.page(key)
    path = f"/{key}/"
    listing = post_list_html(entries, empty_text=f"No {key} yet.")

    body = f"""
    <section class="listing">
        <h1>{escape(page.title)}</h1>
        <p class="listing-description">{escape(page.description)}</p>
        {listing}
    </section>"""

    breadcrumbs = generate_breadcrumb_schema(
        config, [{"name": config.page("home").title, "url": "/"}, {"name": page.title, "url": path}]
    )
    return get_page_wrapper(config, icons, page, path, body, schemas=schema_graph(breadcrumbs))


# ─── Sitemap ───


def build_sitemap(config, posts, projects):
    """Generate sitemap.xml for the listing pages and every entry."""
    today = datetime.now().strftime("%Y-%m-%d")
    urls = [
        {"loc": "/", "lastmod": today, "priority": "1.0"},
        {"loc": "/blog/", "lastmod": today, "priority": "0.8"},
        {"loc": "/projects/", "lastmod": today, "priority": "0.6"},
    ]
    for entry in list(posts) + list(projects):
        urls.append({"loc": entry.url, "lastmod": entry.date.isoformat(), "priority": "0.7"})

    xml_urls = ""
    for url in urls:
        xml_urls += f"""    <url>
        <loc>{escape(config.url(url['loc']))}</loc>
        <lastmod>{url['lastmod']}</lastmod>
        <priority>{url['priority']}</priority>
    </url>\n"""

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{xml_urls}</urlset>"""


# ─── Main ───


def write_file(path, content):
    """Write content to file, creating directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"  Built: {path}")


def copy_icon_stylesheet(icons, output_dir):
    """Ship the icon stylesheet that <head> links to."""
    target = Path(output_dir) / ICON_STYLESHEET_PATH.lstrip("/")
    write_file(target, icons.registry.stylesheet_text())


def build_site(content_dir, output_dir, registry=None, clean=False):
    """Render every page into output_dir. Returns the number of pages written."""
    output_dir = Path(output_dir)
    if clean and output_dir.exists():
        shutil.rmtree(output_dir)

    config, icons = bootstrap(registry)

    content_dir = Path(content_dir)
    posts = load_posts(content_dir / "blog", section="blog")
    projects = load_posts(content_dir / "projects", section="projects")

    pages = {
        "index.html": build_home_page(config, icons, posts, projects),
        "blog/index.html": build_listing_page(config, icons, "blog", posts),
        "projects/index.html": build_listing_page(config, icons, "projects", projects),
    }
    for rel_path, html_text in pages.items():
        write_file(output_dir / rel_path, html_text)

    write_file(output_dir / "sitemap.xml", build_sitemap(config, posts, projects))
    copy_icon_stylesheet(icons, output_dir)
    return len(pages)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate simeonat.github.io pages")
    parser.add_argument("--content", default="content", help="Content directory (default: content)")
    parser.add_argument("--output", default="dist", help="Output directory (default: dist)")
    parser.add_argument("--clean", action="store_true", help="Remove the output directory first")
    args = parser.parse_args(argv)

    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    os.chdir(project_root)

    try:
        page_count = build_site(args.content, args.output, clean=args.clean)
    except (ConfigError, IconError, PostError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Done! {page_count} pages generated.")


if __name__ == "__main__":
    main()
