#!/usr/bin/env python3
"""
Table of Contents builder.
Extracts a nested heading tree from page body HTML and renders it back
as nested lists for the "On this page" panel and the sidebar.
"""
import html
import re
from dataclasses import dataclass, field
from typing import List

from . import config

HEADING_RE = re.compile(
    r'<(h([1-6]))\b[^>]*?\bid=["\']([^"\']+)["\'][^>]*>(.*?)</\1>',
    re.IGNORECASE | re.DOTALL
)


@dataclass
class TocNode:
    """One heading in a page's table of contents."""
    id: str
    title: str
    level: int = 1
    children: List["TocNode"] = field(default_factory=list)


def _heading_text(inner_html: str) -> str:
    text = re.sub(r'<[^>]+>', '', inner_html)
    text = html.unescape(text)
    return re.sub(r'\s+', ' ', text).strip()


def build_toc_tree(body_html: str) -> List[TocNode]:
    """
    Build the heading tree of a page.

    Only headings with an id attribute are anchors, so headings without one
    are skipped. A heading is nested under the nearest preceding heading of
    a lower level; skipped levels (h2 -> h4) simply nest one step deeper.
    """
    roots: List[TocNode] = []
    stack: List[TocNode] = []

    for m in HEADING_RE.finditer(body_html or ""):
        _, level, eid, inner = m.groups()
        title = _heading_text(inner)
        if not title:
            continue

        node = TocNode(id=eid, title=title, level=int(level))
        while stack and stack[-1].level >= node.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)

    return roots


def render_toc(nodes: List[TocNode], max_depth: int = None, _depth: int = 1) -> str:
    """
    Render TOC nodes as nested <ul> markup.

    Nodes nested deeper than max_depth (6 by default, one per heading
    level) are left out.
    """
    if max_depth is None:
        max_depth = config.MAX_TOC_DEPTH
    if not nodes or _depth > max_depth:
        return ""

    out = f'<ul class="toc-list toc-depth-{_depth}">'
    for node in nodes:
        out += f'<li class="toc-level-{_depth}">'
        out += f'<a href="#{html.escape(node.id, quote=True)}">{html.escape(node.title)}</a>'
        out += render_toc(node.children, max_depth, _depth + 1)
        out += '</li>'
    out += '</ul>'
    return out


def count_nodes(nodes: List[TocNode]) -> int:
    return sum(1 + count_nodes(n.children) for n in nodes)
