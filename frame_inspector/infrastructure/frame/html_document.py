"""BeautifulSoup-backed frame document."""
import re
from typing import List, Optional, Sequence
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

from ...domain.frame import FrameDocument, FrameForm, FrameInput

DEFAULT_CHARSET = "UTF-8"
FORM_METHODS = ("get", "post", "dialog")
HIDDEN_TEXT_TAGS = ("script", "style", "template", "noscript", "head")
SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
WHITESPACE_RE = re.compile(r"\s+")
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "dd", "details", "dialog", "div", "dl", "dt",
    "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section", "summary", "table",
    "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
})
INPUT_TYPES = frozenset({
    "button", "checkbox", "color", "date", "datetime-local", "email", "file", "hidden", "image",
    "month", "number", "password", "radio", "range", "reset", "search", "submit", "tel", "text",
    "time", "url", "week",
})


def _collect_text(node: Tag, parts: List[str]) -> None:
    for child in node.children:
        if isinstance(child, SKIPPED_STRINGS):
            continue
        if isinstance(child, NavigableString):
            parts.append(WHITESPACE_RE.sub(" ", str(child)))
        elif child.name in HIDDEN_TEXT_TAGS:
            continue
        elif child.name == "br":
            parts.append("\n")
        elif child.name in BLOCK_TAGS:
            parts.append("\n")
            _collect_text(child, parts)
            parts.append("\n")
        else:
            _collect_text(child, parts)


class HtmlInput(FrameInput):
    """Input element over a parsed tag; writes go straight into the tree."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def type(self) -> str:
        input_type = (self._tag.get("type") or "text").strip().lower()
        return input_type if input_type in INPUT_TYPES else "text"

    @property
    def value(self) -> str:
        return self._tag.get("value", "")

    @value.setter
    def value(self, new_value: str) -> None:
        self._tag["value"] = new_value


class HtmlForm(FrameForm):
    """Form element over a parsed tag."""

    def __init__(self, tag: Tag, document_url: str):
        self._tag = tag
        self._document_url = document_url

    @property
    def action(self) -> str:
        # Browsers resolve the action against the document URL, even when absent.
        return urljoin(self._document_url, self._tag.get("action") or "")

    @property
    def method(self) -> str:
        method = (self._tag.get("method") or "get").lower()
        return method if method in FORM_METHODS else "get"

    def inputs(self) -> Sequence[FrameInput]:
        return [HtmlInput(tag) for tag in self._tag.find_all("input")]


class HtmlDocument(FrameDocument):
    """Parsed document loaded into a frame."""

    def __init__(self, html: str, url: str, referrer: str = "", charset: Optional[str] = None):
        self._soup = BeautifulSoup(html, "html.parser")
        self._url = url
        self._referrer = referrer
        self._charset = charset

    @property
    def title(self) -> str:
        title = self._soup.title
        return title.get_text(strip=True) if title else ""

    @property
    def url(self) -> str:
        return self._url

    @property
    def domain(self) -> str:
        return urlsplit(self._url).hostname or ""

    @property
    def ready_state(self) -> str:
        return "complete"

    @property
    def character_set(self) -> str:
        meta = self._soup.find("meta", charset=True)
        if meta:
            return meta["charset"].upper()
        return (self._charset or DEFAULT_CHARSET).upper()

    @property
    def referrer(self) -> str:
        return self._referrer

    def element_count(self) -> int:
        return len(self._soup.find_all(True))

    def forms(self) -> Sequence[FrameForm]:
        return [HtmlForm(tag, self._url) for tag in self._soup.find_all("form")]

    def inputs(self) -> Sequence[FrameInput]:
        return [HtmlInput(tag) for tag in self._soup.find_all("input")]

    def image_count(self) -> int:
        return len(self._soup.find_all("img"))

    def link_count(self) -> int:
        return len(self._soup.find_all(["a", "area"], href=True))

    def body_text(self) -> Optional[str]:
        """Approximate innerText: inline runs share a line, block elements break lines."""
        body = self._soup.body
        if body is None:
            return None
        parts: List[str] = []
        _collect_text(body, parts)
        lines = (" ".join(line.split()) for line in "".join(parts).split("\n"))
        return "\n".join(line for line in lines if line)
