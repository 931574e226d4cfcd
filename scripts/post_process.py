#!/usr/bin/env python3
"""simeonat.github.io — Post-build validation.

Runs after page generation and checks every generated page for the
elements the shared chrome must always carry (meta tags, JSON-LD, the
home link, and an accessible search trigger).

Usage: python scripts/post_process.py [--output dist]
"""

import argparse
import os
import sys
from glob import glob

# (needle, issue) pairs; a page must contain every needle
REQUIRED_ELEMENTS = [
    ("<title>", "missing <title>"),
    ('rel="canonical"', "missing canonical"),
    ('property="og:title"', "missing OG title"),
    ('property="og:description"', "missing OG description"),
    ("application/ld+json", "missing JSON-LD schema"),
    ('class="site-header"', "missing site header"),
    ('<a href="/" class="site-title', "missing home link"),
    ('aria-label="Search"', "missing search label"),
    ('<span class="sr-only">Search</span>', "missing screen-reader search text"),
]


def find_html_files(root="."):
    """Find all generated HTML files."""
    return sorted(glob(os.path.join(root, "**", "*.html"), recursive=True))


def check_page(content):
    """Return the list of issues for a single page."""
    issues = [issue for needle, issue in REQUIRED_ELEMENTS if needle not in content]
    if "<h1>" not in content and "<h1 " not in content:
        issues.append("missing h1")
    if "<style>" in content:
        issues.append("inline icon stylesheet (auto CSS injection is on)")
    return issues


def validate_pages(root="."):
    """Check all generated pages for required elements. Returns the issue lines."""
    files = find_html_files(root)
    issues = []

    for filepath in files:
        with open(filepath, encoding="utf-8") as f:
            content = f.read()

        page_issues = check_page(content)
        if page_issues:
            rel_path = os.path.relpath(filepath, root)
            issues.append(f"  {rel_path}: {', '.join(page_issues)}")

    if issues:
        print(f"  Validation issues found ({len(issues)} pages):")
        for issue in issues:
            print(issue)
    else:
        print(f"  All {len(files)} pages passed validation")
    return issues


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate generated simeonat.github.io pages")
    parser.add_argument("--output", default="dist", help="Build directory (default: dist)")
    args = parser.parse_args(argv)

    if not os.path.isdir(args.output):
        print(f"Error: {args.output} not found")
        sys.exit(1)

    print("Validating pages...")
    if validate_pages(args.output):
        sys.exit(1)
    print("Validation complete.")


if __name__ == "__main__":
    main()
