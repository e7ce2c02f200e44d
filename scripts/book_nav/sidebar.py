#!/usr/bin/env python3
"""
Sidebar builder for book navigation.
Creates the HTML for the collapsible sidebar with the chapter list.
"""
from html import escape

from .navigation import NavigationContext
from .utils import page_url


def _item(page, current, depth, css_class, local_toc_content=""):
    active = " active" if page == current else ""
    html = f'<li class="{css_class}{active}">'
    html += f'<a href="{page_url(page, depth)}">{escape(page.title)}</a>'
    if page == current and local_toc_content:
        html += f'<div class="local-toc" style="display:block;">{local_toc_content}</div>'
    return html


def build_sidebar(nav: NavigationContext, depth: int = 0, local_toc_content: str = "") -> str:
    """Build the sidebar HTML with navigation."""
    current = nav.page

    if nav.book is None:
        # No book: the sidebar only names the page
        return f'''
    <div class="sidebar-header">
        <div class="header-title">
            <button id="sidebar_toggle" class="sidebar-toggle"><i class="fas fa-bars"></i></button>
            <span>{escape(current.title)}</span>
        </div>
    </div>
    '''

    book_active = ""
    book_toc = ""
    if nav.book == current:
        book_active = " active"
        if local_toc_content:
            book_toc = f'<div class="local-toc" style="display:block;">{local_toc_content}</div>'

    html = f'''
    <div class="sidebar-header">
        <div class="header-title">
            <button id="sidebar_toggle" class="sidebar-toggle"><i class="fas fa-bars"></i></button>
            <a href="{page_url(nav.book, depth)}" class="book-title{book_active}"><span>{escape(nav.book.title)}</span></a>
        </div>
        {book_toc}
    </div>

    <ul class="chapter-list">
    '''

    for chapter in nav.chapters:
        html += _item(chapter, current, depth, "chapter-item", local_toc_content)
        pages = sorted(chapter.pages, key=lambda p: p.order)
        if pages:
            html += '<ul class="page-list">'
            for child in pages:
                html += _item(child, current, depth, "page-item", local_toc_content)
                html += '</li>'
            html += '</ul>'
        html += '</li>'

    html += '</ul>'
    return html
