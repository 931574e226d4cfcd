"""simeonat.github.io — HTML template generators.

Generates: <head>, and the full page wrapper around header/body/footer.
"""

import json
from html import escape

from components import footer_html, header_html
from consts import CSS_VERSION

ICON_STYLESHEET_PATH = "/css/fontawesome.css"


def page_title(config, page):
    """'Blog | Simeon Tran'; the home page uses the bare site title."""
    if not page.title or page == config.page("home"):
        return config.site.title
    return f"{page.title} | {config.site.title}"


def get_html_head(config, page, canonical_path="/", schemas=None):
    """Generate the full <head> section.

    Head order:
    charset → viewport → title → description → canonical → OG → JSON-LD → CSS
    """
    title = escape(page_title(config, page))
    description = escape(page.description)
    canonical = escape(config.url(canonical_path))

    schema_block = ""
    if schemas:
        schema_json = json.dumps(schemas, indent=4)
        schema_block = f"""
    <!-- JSON-LD -->
    <script type="application/ld+json">
    {schema_json}
    </script>"""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <meta name="description" content="{description}">
    <link rel="canonical" href="{canonical}">

    <!-- Favicon -->
    <link rel="icon" href="/favicon.svg" type="image/svg+xml">

    <!-- Open Graph -->
    <meta property="og:type" content="website">
    <meta property="og:url" content="{canonical}">
    <meta property="og:title" content="{title}">
    <meta property="og:description" content="{description}">
    <meta property="og:site_name" content="{escape(config.site.title)}">
    <meta property="og:locale" content="en_US">
{schema_block}

    <!-- CSS (icon stylesheet linked here; the icon library does not inject it) -->
    <link rel="stylesheet" href="{ICON_STYLESHEET_PATH}">
    <link rel="stylesheet" href="/css/styles.css?v={CSS_VERSION}">
</head>"""


def get_page_wrapper(config, icons, page, canonical_path, body_html, schemas=None):
    """Combine head + header + body + footer into a complete page.

    Callers start the page with `icons.reset_page()` before rendering any of
    its icons, body included.
    """
    head = get_html_head(config, page, canonical_path, schemas=schemas)
    header = header_html(config, icons)
    footer = footer_html(config, icons)

    return f"""{head}
<body>
{header}
<main class="mx-auto max-w-screen-sm px-5">
{body_html}
</main>
{footer}
<script src="/js/search.js" defer></script>
</body>
</html>"""
