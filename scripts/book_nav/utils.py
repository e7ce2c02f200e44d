#!/usr/bin/env python3
"""
Utility functions for page output.
Includes output path mapping, base-URL aware links and output validation.
"""
import re
from . import config


def output_path_for(content_path: str) -> str:
    """
    Where a content file is written, relative to the output directory.
    Index files become index.html of their directory.
    """
    parts = content_path.split("/")
    if parts[-1] == config.INDEX_MARKER:
        parts[-1] = "index.html"
    return "/".join(parts)


def depth_of(content_path: str) -> int:
    """Number of directories between the output root and the written file."""
    return output_path_for(content_path).count("/")


def get_asset_url(rel_path: str, depth: int = 0) -> str:
    """
    Returns the web-ready URL for an asset or page.
    If BASE_URL is set, uses absolute path: /Docs/path/to/file
    Else, uses a path relative to a page `depth` directories deep.
    """
    base_url = config.get_base_url()
    if base_url:
        clean_base = base_url.rstrip('/')
        clean_path = rel_path.lstrip('/')
        return f"{clean_base}/{clean_path}"
    else:
        prefix = "../" * depth
        return f"{prefix}{rel_path.lstrip('/')}"


def page_url(page, depth: int = 0) -> str:
    """Link to a page from a page `depth` directories deep."""
    return get_asset_url(output_path_for(page.path), depth)


def validate_output_safety(html_content: str, filename: str) -> tuple:
    """
    Validates that output HTML is safe to write (not empty/corrupted).
    Returns: (is_safe: bool, error_message: str)
    """
    if not html_content:
        return False, f"Empty content for {filename}"

    low = html_content.lower()
    if '<html' not in low:
        return False, f"Missing <html> tag in {filename}"
    if '<body' not in low:
        return False, f"Missing <body> tag in {filename}"

    if not re.search(r'<!-- content-start -->.*?<!-- content-end -->', html_content, re.DOTALL):
        return False, f"Missing content markers in {filename}"

    # Layout checks only look at the skeleton, never at the page body
    skeleton = re.sub(r'<!-- content-start -->.*?<!-- content-end -->', '', html_content, flags=re.DOTALL)

    # Exactly one doc_content
    doc_content_count = skeleton.count('id="doc_content"')
    if doc_content_count != 1:
        return False, f"Invalid doc_content count: {doc_content_count} (expected 1)"

    sidebar_count = skeleton.count('class="sidebar"')
    if sidebar_count != 1:
        return False, f"Invalid sidebar count: {sidebar_count} (expected 1)"

    return True, ""
