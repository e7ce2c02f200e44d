#!/usr/bin/env python3
"""
Book navigation resolver.

Works out, for one page:
    - the book it belongs to (innermost book-flagged section),
    - the book's chapters in reading order,
    - the flattened reading order (book, chapter, chapter pages, ...),
    - the previous and next page in that order.

Nothing here mutates the content tree; every function returns fresh lists.
Missing sections are treated as absent and simply shorten the results.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from . import config
from .content import ContentTree, Page, Section
from .toc import TocNode


@dataclass
class NavigationContext:
    """Everything the renderer needs to lay out navigation for a page."""
    page: Page
    book: Optional[Section] = None
    chapters: List[Section] = field(default_factory=list)
    flat_pages: List[Optional[Page]] = field(default_factory=list)
    current_index: Optional[int] = None
    previous: Optional[Page] = None
    next: Optional[Page] = None
    toc: List[TocNode] = field(default_factory=list)


def _by_order(nodes):
    # sorted() is stable, so equal orders keep their input order
    return sorted(nodes, key=lambda n: n.order)


def resolve_book(page: Page, tree: ContentTree) -> Optional[Section]:
    """
    Find the book a page belongs to.

    Candidates are the page's ancestors (outermost first) followed by the
    page itself, so a book index page resolves to itself. Only index paths
    are loaded. The last book-flagged section seen wins, i.e. the innermost
    book takes precedence over an enclosing one.
    """
    book = None
    for path in list(page.ancestors) + [page.path]:
        if not path.endswith(config.INDEX_MARKER):
            continue
        section = tree.get_section(path)
        if section is not None and section.is_book:
            book = section
    return book


def build_chapters(book: Optional[Section], tree: ContentTree) -> List[Section]:
    """Direct subsections of the book, sorted by order."""
    if book is None:
        return []
    chapters = []
    for path in book.subsections:
        section = tree.get_section(path)
        if section is not None:
            chapters.append(section)
    return _by_order(chapters)


def flatten(book: Optional[Section], chapters: List[Section],
            current: Optional[Page] = None) -> Tuple[List[Optional[Page]], Optional[int]]:
    """
    Linear reading order of a book and the index of the current page in it.

    Order: book, then each chapter followed by its own pages sorted by
    order. The book always sits at index 0 (None when unresolved). The
    index is None when the current page is not part of the sequence.
    """
    flat_pages: List[Optional[Page]] = [book]
    current_index = None
    if current is not None and book is not None and book == current:
        current_index = 0

    for chapter in chapters:
        flat_pages.append(chapter)
        if current is not None and chapter == current:
            current_index = len(flat_pages) - 1
        for child in _by_order(chapter.pages):
            flat_pages.append(child)
            if current is not None and child == current:
                current_index = len(flat_pages) - 1

    return flat_pages, current_index


def compute_prev_next(flat_pages: List[Optional[Page]],
                      current_index: Optional[int]) -> Tuple[Optional[Page], Optional[Page]]:
    """Neighbours of current_index in flat_pages; no wraparound."""
    if current_index is None or not 0 <= current_index < len(flat_pages):
        return None, None
    previous = flat_pages[current_index - 1] if current_index >= 1 else None
    following = flat_pages[current_index + 1] if current_index < len(flat_pages) - 1 else None
    return previous, following


def resolve_navigation(page: Page, tree: ContentTree) -> NavigationContext:
    """Resolve book, chapters, reading order and prev/next for one page."""
    book = resolve_book(page, tree)
    chapters = build_chapters(book, tree)
    flat_pages, current_index = flatten(book, chapters, page)
    previous, following = compute_prev_next(flat_pages, current_index)

    return NavigationContext(
        page=page,
        book=book,
        chapters=chapters,
        flat_pages=flat_pages,
        current_index=current_index,
        previous=previous,
        next=following,
        toc=page.toc,
    )
