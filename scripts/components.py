"""simeonat.github.io — Presentational components.

Every function here is a pure render: configuration in, markup out.
"""

from html import escape

from consts import CV_HREF, PROFILE_IMAGE, social_groups
from icons import FA_FILE_ARROW_DOWN, FA_MAGNIFYING_GLASS

# Flowbite avatar sizes
AVATAR_SIZES = {
    "xs": "w-6 h-6",
    "sm": "w-8 h-8",
    "md": "w-10 h-10",
    "lg": "w-20 h-20",
    "xl": "w-36 h-36",
}


def header_html(config, icons):
    """Generate the site header: home link, CV, blog, and the search trigger.

    The button only carries `data-search-trigger`; the search overlay script
    attaches to it.
    """
    title = escape(config.site.title)
    blog_title = escape(config.page("blog").title or "Blog")
    cv_icon = icons.render(FA_FILE_ARROW_DOWN, "w-4 h-4")
    search_icon = icons.render(FA_MAGNIFYING_GLASS, "w-4 h-4")

    return f"""
<header class="site-header">
    <div class="header-inner mx-auto flex max-w-screen-sm items-center justify-between px-5">
        <a href="/" class="site-title font-semibold">{title}</a>
        <nav class="nav flex items-center gap-1 text-sm">
            <a href="{CV_HREF}" class="nav-link" download>{cv_icon}<span>CV</span></a>
            <span class="nav-sep">/</span>
            <a href="/blog/" class="nav-link">{blog_title}</a>
            <span class="nav-sep">/</span>
            <button type="button" id="search-trigger" class="search-trigger" data-search-trigger aria-label="Search">
                {search_icon}<span class="sr-only">Search</span>
            </button>
        </nav>
    </div>
</header>"""


def social_links_html(config, icons):
    """Generate the social link list in authored order.

    A separator follows each group-closing link except the final one.
    """
    groups = social_groups(config.socials)
    items = []
    for i, group in enumerate(groups):
        for link in group:
            name = escape(link.name)
            items.append(
                f'            <li><a href="{escape(link.href)}" class="social-link" '
                f'aria-label="{name}" target="_blank" rel="noopener noreferrer">'
                f'{icons.render(link.icon, "w-5 h-5")}<span>{name}</span></a></li>'
            )
        if i < len(groups) - 1:
            items.append('            <li class="social-sep" aria-hidden="true">/</li>')

    links = "\n".join(items)
    return f"""
        <ul class="social-links flex flex-wrap items-center gap-2">
{links}
        </ul>"""


def avatar_html(img=PROFILE_IMAGE, rounded=True, size="xl", bordered=True, alt=""):
    """Flowbite-style avatar wrapper for the profile picture."""
    try:
        size_classes = AVATAR_SIZES[size]
    except KeyError:
        raise ValueError(f"Unknown avatar size {size!r}") from None

    classes = [size_classes, "rounded-full" if rounded else "rounded"]
    if bordered:
        classes.append("p-1 ring-2 ring-gray-300 dark:ring-gray-500")

    return f"""
<div class="flex flex-wrap gap-2">
    <div data-testid="flowbite-avatar" class="flex items-center justify-center space-x-4 rounded">
        <div class="relative">
            <img alt="{escape(alt)}" src="{escape(img)}" class="{' '.join(classes)}" data-testid="flowbite-avatar-img">
        </div>
    </div>
</div>"""


def post_list_html(posts, empty_text="No posts yet."):
    """Generate a dated list of post links."""
    if not posts:
        return f'<p class="post-list-empty">{escape(empty_text)}</p>'

    items = ""
    for post in posts:
        items += f"""
        <li class="post-item">
            <a href="{post.url}" class="post-link">
                <span class="post-title">{escape(post.title)}</span>
                <time datetime="{post.date.isoformat()}">{post.date.strftime("%b %d, %Y")}</time>
            </a>
            <p class="post-description">{escape(post.description)}</p>
        </li>"""
    return f"""
    <ul class="post-list">{items}
    </ul>"""


def footer_html(config, icons):
    """Generate the footer with copyright and socials."""
    email = ""
    if config.site.email:
        address = escape(config.site.email)
        email = f'\n        <a href="mailto:{address}" class="footer-email">{address}</a>'

    return f"""
<footer class="site-footer">
    <div class="footer-content mx-auto flex max-w-screen-sm items-center justify-between px-5">
        <span>&copy; {escape(config.site.title)}</span>{email}
{social_links_html(config, icons)}
    </div>
</footer>"""
