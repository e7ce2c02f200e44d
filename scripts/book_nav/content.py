#!/usr/bin/env python3
"""
Content tree loader.

Reads a directory of pre-rendered HTML fragments into Page and Section
objects. A directory holding an index file (config.INDEX_MARKER) is a
section; every other .html file is a page of its directory's section.
Files may open with a YAML front matter block:

    ---
    title: Setup
    extra:
      order: 2
      book: false
      summary: Installing and configuring the tool.
    ---
    <h2 id="requirements">Requirements</h2>
    ...
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import yaml

from . import config
from .toc import TocNode, build_toc_tree


@dataclass(eq=False)
class Page:
    """A single content page. Pages compare equal when their paths match."""
    path: str
    title: str = ""
    content: str = ""
    ancestors: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)
    toc: List[TocNode] = field(default_factory=list)

    @property
    def order(self):
        # "order:" with no value loads as None
        value = self.extra.get("order")
        return 0 if value is None else value

    @property
    def summary(self) -> Optional[str]:
        return self.extra.get("summary")

    @property
    def is_book(self) -> bool:
        return bool(self.extra.get("book", False))

    def __eq__(self, other):
        if not isinstance(other, Page):
            return NotImplemented
        return self.path == other.path

    def __hash__(self):
        return hash(self.path)


@dataclass(eq=False)
class Section(Page):
    """A page that owns child pages and child sections."""
    subsections: List[str] = field(default_factory=list)
    pages: List[Page] = field(default_factory=list)


class ContentTree:
    """Read-only lookup over every loaded page and section, keyed by path."""

    def __init__(self, pages: Optional[Dict[str, Page]] = None):
        self._pages = dict(pages or {})

    @classmethod
    def from_nodes(cls, nodes: Iterable[Page]) -> "ContentTree":
        return cls({node.path: node for node in nodes})

    def get_page(self, path: str) -> Optional[Page]:
        return self._pages.get(path)

    def get_section(self, path: str) -> Optional[Section]:
        node = self._pages.get(path)
        if isinstance(node, Section):
            return node
        return None

    def iter_pages(self) -> Iterator[Page]:
        for path in sorted(self._pages):
            yield self._pages[path]

    def __len__(self):
        return len(self._pages)

    def __contains__(self, path):
        return path in self._pages


def index_path(dir_parts: Tuple[str, ...]) -> str:
    """Path of the index file for a directory given as path parts."""
    return "/".join(dir_parts + (config.INDEX_MARKER,))


def ancestors_for(rel_path: str) -> List[str]:
    """
    Index paths of every section enclosing rel_path, root first.

    A section is not its own ancestor, so for an index file the walk stops
    at the parent directory.
    """
    parts = tuple(rel_path.split("/"))
    dir_parts = parts[:-1]
    if parts[-1] == config.INDEX_MARKER:
        if not dir_parts:
            return []
        dir_parts = dir_parts[:-1]
    return [index_path(dir_parts[:i]) for i in range(len(dir_parts) + 1)]


def split_front_matter(text: str, source: str = "") -> Tuple[Dict[str, Any], str]:
    """
    Split a leading YAML front matter block from the body.
    Returns (front_matter, body). Malformed YAML yields an empty dict.
    """
    delim = config.FRONT_MATTER_DELIM
    stripped = text.lstrip("\ufeff")
    if not stripped.startswith(delim + "\n") and not stripped.startswith(delim + "\r\n"):
        return {}, text

    lines = stripped.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == delim:
            raw = "".join(lines[1:i])
            body = "".join(lines[i + 1:])
            break
    else:
        print(f"  Warning: unterminated front matter in {source or '<string>'}")
        return {}, text

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        print(f"  Warning: could not parse front matter in {source or '<string>'}: {e}")
        return {}, body

    if data is None:
        data = {}
    if not isinstance(data, dict):
        print(f"  Warning: front matter in {source or '<string>'} is not a mapping, ignoring it")
        data = {}
    return data, body


def _build_node(rel_path: str, text: str) -> Page:
    front, body = split_front_matter(text, rel_path)

    extra = front.get("extra") or {}
    if not isinstance(extra, dict):
        print(f"  Warning: 'extra' in {rel_path} is not a mapping, ignoring it")
        extra = {}
    extra = dict(extra)
    for key, value in front.items():
        if key not in ("title", "extra"):
            extra.setdefault(key, value)

    title = front.get("title")
    if not title:
        stem = rel_path.split("/")[-1]
        if stem == config.INDEX_MARKER:
            parts = rel_path.split("/")
            stem = parts[-2] if len(parts) > 1 else "Home"
        title = Path(stem).stem.replace("_", " ").replace("-", " ").strip().title()

    cls = Section if rel_path.split("/")[-1] == config.INDEX_MARKER else Page
    return cls(
        path=rel_path,
        title=str(title),
        content=body,
        ancestors=ancestors_for(rel_path),
        extra=extra,
        toc=build_toc_tree(body),
    )


def load_content_tree(content_dir=None) -> ContentTree:
    """Load every .html file under content_dir into a ContentTree."""
    root = Path(content_dir) if content_dir is not None else config.CONTENT_DIR
    if not root.is_dir():
        raise RuntimeError(f"Content directory not found: {root}")

    nodes: Dict[str, Page] = {}
    for f in sorted(root.rglob(f"*{config.PAGE_SUFFIX}")):
        rel = f.relative_to(root).as_posix()
        try:
            text = f.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            print(f"  Warning: Could not read {rel}: {e}")
            continue
        nodes[rel] = _build_node(rel, text)

    # Link children to their parent sections (path order keeps this stable)
    for rel in sorted(nodes):
        node = nodes[rel]
        if not node.ancestors:
            continue
        parent = nodes.get(node.ancestors[-1])
        if not isinstance(parent, Section):
            continue
        if isinstance(node, Section):
            parent.subsections.append(node.path)
        else:
            parent.pages.append(node)

    sections = sum(1 for n in nodes.values() if isinstance(n, Section))
    print(f"  [Content] Loaded {len(nodes)} files ({sections} sections) from {root}")
    return ContentTree(nodes)
