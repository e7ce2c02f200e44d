#!/usr/bin/env python3
"""
Build pipeline: content tree in, finished HTML pages out.

For every page:
    1) Resolve book, chapters and prev/next (navigation.resolve_navigation).
    2) Render the in-page TOC, sidebar and bottom nav.
    3) Wrap everything in the shared page skeleton.
    4) Validate the output and only then write it.
"""
import shutil
from pathlib import Path

from tqdm import tqdm

from . import config
from .content import ContentTree, Page, load_content_tree
from .navigation import resolve_navigation
from .page_renderer import build_bottom_nav, render_page_html
from .sidebar import build_sidebar
from .toc import count_nodes, render_toc
from .utils import depth_of, output_path_for, validate_output_safety


def render_page(page: Page, tree: ContentTree) -> str:
    """Render the full HTML document for one page."""
    nav = resolve_navigation(page, tree)
    depth = depth_of(page.path)

    toc_html = render_toc(nav.toc)
    sidebar_html = build_sidebar(nav, depth=depth, local_toc_content=toc_html)
    bottom_nav = ""
    if nav.previous is not None or nav.next is not None:
        bottom_nav = build_bottom_nav(nav.previous, nav.next, depth=depth)

    body_class = "page-book" if nav.book is not None else "page-standalone"
    return render_page_html(
        title=page.title,
        body_content=page.content,
        sidebar_html=sidebar_html,
        toc_html=toc_html,
        bottom_nav_html=bottom_nav,
        summary=page.summary,
        depth=depth,
        body_class=body_class,
    )


def process_page(page: Page, tree: ContentTree, output_dir: Path) -> bool:
    """Render and write one page. Returns False when the page was not written."""
    html = render_page(page, tree)
    out_rel = output_path_for(page.path)

    is_safe, error_msg = validate_output_safety(html, out_rel)
    if not is_safe:
        print(f"  [X] SAFETY CHECK FAILED for {out_rel}: {error_msg}")
        print(f"  [!] Skipping {out_rel}")
        return False

    out = output_dir / out_rel
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    return True


ASSETS_DIR = Path(__file__).parent / "assets"


def copy_assets(output_dir: Path) -> int:
    """Copy the bundled stylesheets into <output>/assets."""
    dest = output_dir / "assets"
    dest.mkdir(parents=True, exist_ok=True)
    copied = 0
    for f in sorted(ASSETS_DIR.glob("*")):
        if f.is_file():
            shutil.copy2(f, dest / f.name)
            copied += 1
    return copied


def main() -> int:
    """Build every page of the content tree. Returns the number of pages written."""
    if config.BASE_URL:
        print(f"--> Using Base URL: {config.BASE_URL}")
    print(f">>> Building pages from {config.CONTENT_DIR} into {config.OUTPUT_DIR}...")

    tree = load_content_tree(config.CONTENT_DIR)
    output_dir = Path(config.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = 0
    headings = 0
    for page in tqdm(list(tree.iter_pages()), desc="Rendering", unit="page"):
        headings += count_nodes(page.toc)
        if process_page(page, tree, output_dir):
            written += 1

    print(f"  [OK] Wrote {written}/{len(tree)} pages ({headings} TOC headings)")
    print(f"  [Assets] Copied {copy_assets(output_dir)} files")
    print(">>> Done.")
    return written
