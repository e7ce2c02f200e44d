#!/usr/bin/env python3
"""
Book Navigation Builder
=======================

Turns a directory of pre-rendered HTML fragments into a book-style site:
every page gets a chapter sidebar, an "On this page" contents panel and
previous/next links that follow the book's reading order.

Modules:
    - config: Configuration constants and global settings
    - content: Page/Section model and the content directory loader
    - toc: Heading tree extraction and rendering
    - navigation: Book, chapter and prev/next resolution
    - sidebar: Navigation sidebar generation
    - page_renderer: Unified HTML page generation
    - utils: Output paths, links and output validation

Usage:
    from book_nav import run
    run()  # With default arguments

    # Or with custom directories and base URL:
    run(content_dir="docs", output_dir="site", base_url="/Docs")
"""

__version__ = "1.0.0"


def run(content_dir=None, output_dir=None, base_url: str = "") -> int:
    """
    Run the full build.

    Args:
        content_dir: Directory holding the content tree (default: content/)
        output_dir: Directory the finished pages are written to
        base_url: Base URL for deployment under a sub-path (e.g., "/Docs").
                  Leave empty for local filesystem browsing.

    Returns:
        Number of pages written.
    """
    from . import config, core

    if content_dir is not None:
        config.set_content_dir(content_dir)
    if output_dir is not None:
        config.set_output_dir(output_dir)
    config.set_base_url(base_url)

    return core.main()


def run_with_args() -> None:
    """
    Run the build with command-line arguments.
    This is the CLI entry point.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Build book-style HTML pages with chapter and prev/next navigation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m book_nav                               # Local development
    python -m book_nav --content-dir docs --base-url /Docs
        """
    )
    parser.add_argument("--content-dir", default=None, help="Content tree directory (default: content)")
    parser.add_argument("--output-dir", default=None, help="Output directory (default: html_output)")
    parser.add_argument(
        "--base-url",
        default="",
        help="Base URL for sub-path deployments (e.g., '/Docs')"
    )

    args = parser.parse_args()
    run(content_dir=args.content_dir, output_dir=args.output_dir, base_url=args.base_url)


# Export key functions and classes for direct imports
from .config import (
    INDEX_MARKER,
    MAX_TOC_DEPTH,
    set_base_url,
    get_base_url,
)

from .content import (
    Page,
    Section,
    ContentTree,
    load_content_tree,
)

from .toc import (
    TocNode,
    build_toc_tree,
    render_toc,
)

from .navigation import (
    NavigationContext,
    resolve_book,
    build_chapters,
    flatten,
    compute_prev_next,
    resolve_navigation,
)

from .sidebar import (
    build_sidebar,
)

from .page_renderer import (
    render_page_html,
    build_bottom_nav,
)

from .utils import (
    get_asset_url,
    output_path_for,
    validate_output_safety,
)


__all__ = [
    # Main entry points
    'run',
    'run_with_args',
    # Config
    'INDEX_MARKER',
    'MAX_TOC_DEPTH',
    'set_base_url',
    'get_base_url',
    # Content
    'Page',
    'Section',
    'ContentTree',
    'load_content_tree',
    # TOC
    'TocNode',
    'build_toc_tree',
    'render_toc',
    # Navigation
    'NavigationContext',
    'resolve_book',
    'build_chapters',
    'flatten',
    'compute_prev_next',
    'resolve_navigation',
    # Rendering
    'build_sidebar',
    'render_page_html',
    'build_bottom_nav',
    # Utils
    'get_asset_url',
    'output_path_for',
    'validate_output_safety',
]
