#!/usr/bin/env python3
"""
Build the book site from a source checkout without installing the package.

    python scripts/run_book_nav.py --content-dir docs --output-dir site
    python scripts/run_book_nav.py --base-url /Docs

After `pip install -e .` the `book-nav` command does the same.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from book_nav import run_with_args  # noqa: E402

if __name__ == "__main__":
    run_with_args()
