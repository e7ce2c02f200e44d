#!/usr/bin/env python3
"""
Build configuration and global settings.
Shared across all book_nav modules.
"""
from pathlib import Path

# --- CONFIGURATION ---
BASE_URL = ""  # Set via --base-url argument
CONTENT_DIR = Path("content")
OUTPUT_DIR = Path("html_output")

# --- CONTENT CONVENTIONS ---
INDEX_MARKER = "_index.html"  # File that turns a directory into a section
PAGE_SUFFIX = ".html"
FRONT_MATTER_DELIM = "---"

# --- CONSTANTS ---
MAX_TOC_DEPTH = 6  # h1..h6


def set_base_url(url: str):
    """Set the base URL for asset paths."""
    global BASE_URL
    BASE_URL = url


def get_base_url() -> str:
    """Get the current base URL."""
    return BASE_URL


def set_content_dir(path):
    global CONTENT_DIR
    CONTENT_DIR = Path(path)


def set_output_dir(path):
    global OUTPUT_DIR
    OUTPUT_DIR = Path(path)
