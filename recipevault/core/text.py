import re
import html

TAG_REGEX = re.compile(r"<[^>]+>")
WHITESPACE_REGEX = re.compile(r"\s+")


def strip_tags(text: str) -> str:
    """Remove anything that looks like a markup tag."""
    if not text:
        return ""
    return TAG_REGEX.sub("", text)


def decode_entities(text: str) -> str:
    """
    Decode HTML entities (&amp;, &#39;, &nbsp; ...).
    Non-breaking spaces become plain spaces so trimming works on them.
    """
    if not text:
        return ""
    return html.unescape(text).replace("\xa0", " ")


def clean_whitespace(text: str) -> str:
    return WHITESPACE_REGEX.sub(" ", text or "").strip()


def clean_html_text(fragment: str) -> str:
    """Markup fragment -> display text. Tags first, then entities, so an
    escaped "&lt;b&gt;" survives as literal text."""
    return clean_whitespace(decode_entities(strip_tags(fragment)))
