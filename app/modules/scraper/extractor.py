import html as html_lib
import logging
import re
from typing import Dict, List, Optional

import trafilatura
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

NO_CONTENT_TEXT = "Content could not be extracted from this page."

# Tried in order; the first whose text is long enough wins
PAGE_SELECTORS = ["article", "main", ".content", ".post-content", ".entry-content", "#content", ".main-content", "body"]
READABLE_SELECTORS = ["main", "article", ".content", ".post-content", ".entry-content", "#content", ".main-content", "body"]
CLEAN_SELECTORS = [
    "article", "main", ".content", ".post-content", ".entry-content", "#content",
    ".main-content", ".article-content", ".post-body", ".entry-body",
]

# Blocks removed before looking for content
NOISE_TAGS = ["script", "style", "noscript", "iframe", "svg", "nav", "header", "footer", "aside"]

_TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
_META_DESC_RE = re.compile(
    r"""<meta[^>]*name=["']description["'][^>]*content=["']([^"']+)["']""", re.IGNORECASE
)
_OG_DESC_RE = re.compile(
    r"""<meta[^>]*property=["']og:description["'][^>]*content=["']([^"']+)["']""", re.IGNORECASE
)
_BODY_RE = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text or "").strip()


def truncate(text: str, budget: int) -> str:
    if len(text) > budget:
        return text[:budget] + "..."
    return text


def strip_tags(fragment: str) -> str:
    """Tags to spaces, whitespace collapsed, HTML entities decoded"""
    text = collapse_whitespace(_TAG_RE.sub(" ", fragment or ""))
    return html_lib.unescape(text).replace("\xa0", " ").strip()


def remove_blocks(raw_html: str, tags: List[str]) -> str:
    cleaned = raw_html
    for tag in tags:
        cleaned = re.sub(rf"<{tag}[^>]*>[\s\S]*?</{tag}>", "", cleaned, flags=re.IGNORECASE)
    return cleaned


def regex_title(raw_html: str) -> str:
    match = _TITLE_RE.search(raw_html or "")
    return html_lib.unescape(match.group(1).strip()) if match else ""


def regex_description(raw_html: str, og_fallback: bool = True) -> str:
    match = _META_DESC_RE.search(raw_html or "")
    if not match and og_fallback:
        match = _OG_DESC_RE.search(raw_html or "")
    return html_lib.unescape(match.group(1).strip()) if match else ""


def _meta_content(soup: BeautifulSoup, **attrs) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag and tag.get("content"):
        return tag["content"].strip()
    return ""


def extract_page(raw_html: str, budget: int = 8000) -> Dict[str, str]:
    """
    Selector-driven extraction used for link classification.
    Returns title, description, og_type and text (truncated to budget).
    """
    soup = BeautifulSoup(raw_html or "", "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    og_type = _meta_content(soup, property="og:type")
    og_title = _meta_content(soup, property="og:title")
    og_desc = _meta_content(soup, property="og:description")
    meta_desc = _meta_content(soup, name="description")
    title = collapse_whitespace(soup.title.get_text()) if soup.title else ""
    title = title or og_title

    main_text = ""
    for selector in PAGE_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = collapse_whitespace(element.get_text(" "))
        if len(text) > 200:
            main_text = text
            break

    if not main_text and soup.body is not None:
        main_text = collapse_whitespace(soup.body.get_text(" "))
    if not main_text or len(main_text) < 100:
        main_text = og_desc or meta_desc or ""

    return {
        "title": title,
        "description": meta_desc or og_desc,
        "og_type": og_type,
        "text": truncate(main_text, budget),
    }


def _manual_readable(raw_html: str) -> Dict[str, str]:
    title = regex_title(raw_html)
    description = regex_description(raw_html, og_fallback=False)
    text = ""

    soup = BeautifulSoup(remove_blocks(raw_html, ["script", "style"]), "html.parser")
    for selector in READABLE_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        candidate = strip_tags(element.decode_contents())
        if len(candidate) > 100:
            text = candidate
            break

    if not text:
        body = _BODY_RE.search(remove_blocks(raw_html, ["script", "style"]))
        if body:
            text = strip_tags(body.group(1))

    return {"title": title, "text": text, "description": description}


def extract_readable(raw_html: str, budget: int = 8000) -> Dict[str, str]:
    """
    Readability extraction (trafilatura) with a selector/regex fallback.
    Always returns title, text and description; text truncated to budget.
    """
    title = text = description = ""
    try:
        text = trafilatura.extract(raw_html, include_comments=False, include_tables=False) or ""
        metadata = trafilatura.extract_metadata(raw_html)
        if metadata is not None:
            title = metadata.title or ""
            description = metadata.description or ""
    except Exception as e:
        logger.info(f"Readability extraction failed, trying manual extraction: {e}")

    if not title or not text:
        manual = _manual_readable(raw_html)
        title = manual["title"]
        text = manual["text"]
        description = manual["description"]

    if not title and not text:
        title = "Web Page"
        text = NO_CONTENT_TEXT
        description = "Unable to extract content from this URL."

    return {"title": title, "text": truncate(collapse_whitespace(text), budget), "description": description}


def clean_extract(
    raw_html: str,
    budget: int = 5000,
    noise_tags: Optional[List[str]] = None,
    fallback: bool = True,
) -> Dict[str, str]:
    """
    Regex cleanup extraction: drop noise blocks, pick the first content
    container with enough markup, strip tags. With fallback, content is never
    empty.
    """
    title = regex_title(raw_html)
    description = regex_description(raw_html)
    cleaned = remove_blocks(raw_html or "", noise_tags if noise_tags is not None else NOISE_TAGS)

    fragment = ""
    soup = BeautifulSoup(cleaned, "html.parser")
    for selector in CLEAN_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        inner = element.decode_contents()
        if len(inner) > 200:
            fragment = inner
            break

    if not fragment:
        body = _BODY_RE.search(cleaned)
        fragment = body.group(1) if body else ""

    content = truncate(strip_tags(fragment), budget) if fragment else ""
    if not content and fallback:
        content = description or title or NO_CONTENT_TEXT

    return {"title": title, "description": description, "content": content}
