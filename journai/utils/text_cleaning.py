from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_HTML_TAG_RE = re.compile(r"<[^>]*>")

# Markdown decorations stripped when deriving a title; applied in order.
_MARKDOWN_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"```[\s\S]*?```"), ""),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"__([^_]+)__"), r"\1"),
    (re.compile(r"_([^_]+)_"), r"\1"),
    (re.compile(r"~~([^~]+)~~"), r"\1"),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (re.compile(r"^\s*[-*+]\s+", re.MULTILINE), ""),
    (re.compile(r"^\s*\d+\.\s+", re.MULTILINE), ""),
    (re.compile(r"^\s*>\s+", re.MULTILINE), ""),
]

DEFAULT_TITLE = "Journal Entry"


def remove_html(text: str) -> str:
    return _HTML_TAG_RE.sub(" ", text)


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_markdown(text: str) -> str:
    for pattern, repl in _MARKDOWN_RULES:
        text = pattern.sub(repl, text)
    return text


def count_words(content: str | None) -> int:
    """Count whitespace-separated words after replacing markup tags with spaces."""
    if not content or not isinstance(content, str):
        return 0
    text_only = remove_html(content).strip()
    if not text_only:
        return 0
    return len(text_only.split())


def generate_title(text: str | None, max_words: int = 8, max_length: int = 50) -> str:
    """Derive a short title from the first words of an entry."""
    if not text:
        return DEFAULT_TITLE
    cleaned = normalize_whitespace(strip_markdown(remove_html(text).strip()))
    title = " ".join(cleaned.split()[:max_words])
    if len(title) > max_length:
        title = title[: max_length - 3] + "..."
    return title or DEFAULT_TITLE
