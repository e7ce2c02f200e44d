#!/usr/bin/env python3
"""
Page renderer - unified HTML page generation.
The single source of truth for creating HTML page skeletons.
"""
from html import escape

from .utils import get_asset_url, page_url


def get_common_head(title: str, depth: int = 0) -> str:
    css_url = get_asset_url("assets/book.css", depth)
    return f"""<meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{escape(title)}</title>
    <link rel="stylesheet" href="{css_url}">"""


def build_bottom_nav(previous, following, depth: int = 0) -> str:
    """
    Previous/next cards under the content.
    A missing neighbour leaves a spacer so the other card keeps its side.
    """
    html = '<nav class="bottom-nav">'

    if previous is not None:
        html += f'''
        <a href="{page_url(previous, depth)}" class="nav-btn nav-prev" rel="prev">
            <div class="nav-label">Previous</div>
            <div class="nav-title">&larr; {escape(previous.title)}</div>
        </a>'''
    else:
        html += '<div class="nav-spacer"></div>'

    if following is not None:
        html += f'''
        <a href="{page_url(following, depth)}" class="nav-btn nav-next primary" rel="next">
            <div class="nav-label">Next</div>
            <div class="nav-title">{escape(following.title)} &rarr;</div>
        </a>'''
    else:
        html += '<div class="nav-spacer"></div>'

    html += '</nav>'
    return html


def render_page_html(title: str, body_content: str, sidebar_html: str, toc_html: str = "",
                     bottom_nav_html: str = "", summary: str = None, extra_styles: str = "",
                     depth: int = 0, body_class: str = "") -> str:
    """
    Unified page renderer - THE ONLY function that creates the HTML skeleton.
    Includes the shared layout: Sidebar, Top Bar, Content Card and the
    "On this page" panel.

    Args:
        title: Page title
        body_content: Main content HTML (already rendered)
        sidebar_html: Sidebar navigation HTML
        toc_html: In-page table of contents HTML
        bottom_nav_html: Bottom navigation HTML (prev/next pages)
        summary: Optional one-line summary shown under the title
        extra_styles: Additional CSS styles
        depth: Directory depth of the page, for relative asset links
        body_class: Additional CSS class for body element
    """
    head_html = get_common_head(title, depth)
    summary_html = f'<p class="page-summary">{escape(summary)}</p>' if summary else ""
    style_html = f"<style>{extra_styles}</style>" if extra_styles else ""

    toc_panel = ""
    if toc_html:
        toc_panel = f"""
            <aside class="page-toc" id="page_toc">
                <div class="page-toc-title">On this page</div>
                {toc_html}
            </aside>"""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {head_html}
    {style_html}
</head>
<body id="page-top-body" class="{body_class}">
    <aside class="sidebar" id="sidebar">
        {sidebar_html}
    </aside>
    <div class="main-wrapper">
        <header class="top-bar" id="topbar">
            <div class="page-title">{escape(title)}</div>
        </header>
        <main class="content-scroll" id="content_area">
            <div class="container">
                <div class="card">
                    <div class="card-body" id="doc_content">
                        <h1 class="page-heading">{escape(title)}</h1>
                        {summary_html}
                        <!-- content-start -->
                        {body_content}
                        <!-- content-end -->
                    </div>
                    {bottom_nav_html}
                </div>
            </div>{toc_panel}
        </main>
    </div>
</body>
</html>"""
