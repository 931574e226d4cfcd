"""simeonat.github.io — Structured data.

Schema.org JSON-LD generators for the portfolio pages:
- Person (with social profiles as sameAs)
- WebSite
- BreadcrumbList
"""


def generate_person_schema(config):
    """Generate Person schema for the site owner."""
    schema = {
        "@type": "Person",
        "name": config.site.title,
        "description": config.site.description,
        "url": config.url("/"),
        "sameAs": [link.href for link in config.socials],
    }
    if config.site.email:
        schema["email"] = f"mailto:{config.site.email}"
    return schema


def generate_website_schema(config):
    return {
        "@type": "WebSite",
        "name": config.site.title,
        "description": config.page("home").description,
        "url": config.url("/"),
    }


def generate_breadcrumb_schema(config, breadcrumbs):
    """Generate BreadcrumbList schema markup.

    Args:
        breadcrumbs: list of {"name": "Blog", "url": "/blog/"}
    """
    items = []
    for i, crumb in enumerate(breadcrumbs, 1):
        items.append({
            "@type": "ListItem",
            "position": i,
            "name": crumb["name"],
            "item": config.url(crumb["url"]),
        })

    return {
        "@type": "BreadcrumbList",
        "itemListElement": items,
    }


def schema_graph(*schemas):
    """Wrap schemas in a single @graph document, skipping empty entries."""
    return {
        "@context": "https://schema.org",
        "@graph": [s for s in schemas if s],
    }


def slugify(text):
    """Convert text to URL slug."""
    return (
        text.lower()
        .replace(" / ", "-")
        .replace("/", "-")
        .replace(" ", "-")
        .replace("&", "and")
        .replace(",", "")
        .replace(".", "")
        .replace("'", "")
    )
