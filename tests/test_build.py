from book_nav import run
from book_nav import config
from book_nav.content import load_content_tree
from book_nav.core import render_page
from book_nav.page_renderer import build_bottom_nav, render_page_html
from book_nav.utils import depth_of, get_asset_url, output_path_for, validate_output_safety

from conftest import make_page


def test_output_paths():
    assert output_path_for("_index.html") == "index.html"
    assert output_path_for("guide/setup/_index.html") == "guide/setup/index.html"
    assert output_path_for("guide/setup/install.html") == "guide/setup/install.html"
    assert depth_of("guide/setup/install.html") == 2
    assert depth_of("_index.html") == 0


def test_asset_urls():
    assert get_asset_url("assets/book.css", 2) == "../../assets/book.css"
    config.set_base_url("/Docs/")
    assert get_asset_url("/assets/book.css", 2) == "/Docs/assets/book.css"


def test_bottom_nav_spacers():
    html = build_bottom_nav(None, make_page("b.html", "Next one"))
    assert 'class="nav-spacer"' in html
    assert 'href="b.html"' in html
    assert 'rel="prev"' not in html


def test_render_chapter_page(content_dir):
    tree = load_content_tree(content_dir)
    html = render_page(tree.get_page("guide/setup/_index.html"), tree)

    ok, msg = validate_output_safety(html, "setup")
    assert ok, msg
    assert 'class="page-book"' in html
    assert 'class="page-summary">Getting things running.' in html
    assert 'href="../../guide/intro/index.html"' in html  # previous
    assert 'href="../../guide/setup/install.html"' in html  # next
    assert 'class="chapter-item active"' in html
    assert "On this page" in html


def test_render_standalone_page(content_dir):
    tree = load_content_tree(content_dir)
    html = render_page(tree.get_page("about.html"), tree)
    assert 'class="page-standalone"' in html
    assert "bottom-nav" not in html
    assert 'href="#team"' in html


def test_validate_rejects_broken_output():
    assert validate_output_safety("", "x")[0] is False
    assert validate_output_safety("<html><body></body></html>", "x")[0] is False


def test_full_build(content_dir, tmp_path, capsys):
    out = tmp_path / "site"
    written = run(content_dir=content_dir, output_dir=out)

    assert written == 7
    assert (out / "index.html").exists()
    assert (out / "guide" / "setup" / "install.html").exists()
    assert (out / "assets" / "book.css").exists()
    configure = (out / "guide" / "setup" / "configure.html").read_text(encoding="utf-8")
    assert 'rel="prev"' in configure
    assert 'rel="next"' not in configure
    assert "[OK] Wrote 7/7 pages" in capsys.readouterr().out


def test_body_using_layout_class_names_is_written(tmp_path):
    content = tmp_path / "content"
    content.mkdir()
    (content / "p.html").write_text(
        '<div class="sidebar">note</div>\n<div id="doc_content">inner</div>\n', encoding="utf-8"
    )
    out = tmp_path / "site"

    assert run(content_dir=content, output_dir=out) == 1
    html = (out / "p.html").read_text(encoding="utf-8")
    assert validate_output_safety(html, "p.html") == (True, "")


def test_validate_counts_skeleton_only():
    html = render_page_html("T", '<aside class="sidebar">x</aside>', sidebar_html="")
    assert validate_output_safety(html, "t")[0] is True
    doubled = html.replace('<!-- content-start -->', '<div id="doc_content"></div><!-- content-start -->')
    assert validate_output_safety(doubled, "t")[0] is False


def test_book_root_sidebar_shows_local_toc(content_dir):
    tree = load_content_tree(content_dir)
    html = render_page(tree.get_section("guide/_index.html"), tree)
    sidebar = html.split('<div class="main-wrapper">')[0]

    assert 'class="book-title active"' in sidebar
    assert 'class="local-toc"' in sidebar
    assert 'href="#about"' in sidebar
