import pytest

from book_nav import config
from book_nav.content import ContentTree, Page, Section


def make_section(path, title, order=0, book=False, ancestors=(), subsections=(), pages=(), **extra):
    extra.update(order=order)
    if book:
        extra["book"] = True
    return Section(path=path, title=title, ancestors=list(ancestors), extra=extra,
                   subsections=list(subsections), pages=list(pages))


def make_page(path, title, order=0, ancestors=(), **extra):
    extra.update(order=order)
    return Page(path=path, title=title, ancestors=list(ancestors), extra=extra)


@pytest.fixture
def guide_tree():
    """
    Guide (book)
      Intro (order 1)
      Setup (order 2)
        Install (order 1)
        Configure (order 2)
    Pages and chapters are declared out of order on purpose.
    """
    root_anc = ["_index.html"]
    guide_anc = root_anc + ["guide/_index.html"]
    setup_anc = guide_anc + ["guide/setup/_index.html"]

    configure = make_page("guide/setup/configure.html", "Configure", order=2, ancestors=setup_anc)
    install = make_page("guide/setup/install.html", "Install", order=1, ancestors=setup_anc)
    setup = make_section("guide/setup/_index.html", "Setup", order=2, ancestors=guide_anc,
                         pages=[configure, install])
    intro = make_section("guide/intro/_index.html", "Intro", order=1, ancestors=guide_anc)
    guide = make_section("guide/_index.html", "Guide", book=True, ancestors=root_anc,
                         subsections=["guide/setup/_index.html", "guide/intro/_index.html"])
    orphan = make_page("misc/orphan.html", "Orphan", ancestors=["_index.html", "misc/_index.html"])

    return ContentTree.from_nodes([guide, intro, setup, install, configure, orphan])


@pytest.fixture(autouse=True)
def reset_config():
    saved = (config.BASE_URL, config.CONTENT_DIR, config.OUTPUT_DIR)
    yield
    config.BASE_URL, config.CONTENT_DIR, config.OUTPUT_DIR = saved


@pytest.fixture
def content_dir(tmp_path):
    """The same guide laid out on disk, plus a standalone page outside any book."""
    files = {
        "_index.html": "---\ntitle: Home\n---\n<p>Welcome</p>\n",
        "guide/_index.html": "---\ntitle: Guide\nextra:\n  book: true\n---\n<h2 id=\"about\">About</h2>\n",
        "guide/intro/_index.html": "---\ntitle: Intro\nextra:\n  order: 1\n---\n<p>Hello</p>\n",
        "guide/setup/_index.html": (
            "---\ntitle: Setup\nextra:\n  order: 2\n  summary: Getting things running.\n---\n"
            "<h2 id=\"requirements\">Requirements</h2>\n<h3 id=\"python\">Python</h3>\n"
        ),
        "guide/setup/install.html": "---\ntitle: Install\nextra:\n  order: 1\n---\n<p>pip</p>\n",
        "guide/setup/configure.html": "---\ntitle: Configure\nextra:\n  order: 2\n---\n<p>edit</p>\n",
        "about.html": "<h2 id=\"team\">Team</h2>\n",
    }
    root = tmp_path / "content"
    for rel, text in files.items():
        f = root / rel
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text(text, encoding="utf-8")
    return root
