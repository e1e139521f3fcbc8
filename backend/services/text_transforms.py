"""
Text transforms applied to field text before a secondary diff state is built.
"""
import re
from typing import Callable, Dict, Iterable, Optional

from bs4 import BeautifulSoup, Comment

from services.errors import ConfigurationError

HTML_TO_TEXT = "html_to_text"
FILTER_XSS = "filter_xss"
FILTER_XSS_STRICT = "filter_xss_strict"

DEFAULT_ALLOWED_TAGS = ("a", "em", "strong", "cite", "blockquote", "code", "ul", "ol", "li", "dl", "dt", "dd")

BLOCK_TAGS = {
    "p", "div", "section", "article", "header", "footer", "blockquote", "pre",
    "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li", "dl", "dt", "dd",
    "table", "tr", "hr",
}

URL_ATTRIBUTES = {"href", "src", "action", "cite"}
UNSAFE_PROTOCOLS = re.compile(r"^\s*(javascript|vbscript|data)\s*:", re.IGNORECASE)

ALIASES = {
    "strip_html_to_text": HTML_TO_TEXT,
    "drupal_html_to_text": HTML_TO_TEXT,
    "filter_xss_all": FILTER_XSS_STRICT,
}


def html_to_text(text: str) -> str:
    """Visible text of an HTML fragment, block boundaries kept as line breaks"""
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup.find_all(["script", "style"]):
        tag.decompose()
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(sorted(BLOCK_TAGS)):
        tag.insert_after("\n")

    plain = soup.get_text()
    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in plain.split("\n")]
    plain = re.sub(r"\n{3,}", "\n\n", "\n".join(lines))
    return plain.strip("\n")


def filter_xss(text: str, allowed_tags: Iterable[str] = DEFAULT_ALLOWED_TAGS) -> str:
    """Strip every tag outside allowed_tags (keeping its text) and unsafe attributes"""
    allowed = set(allowed_tags)
    soup = BeautifulSoup(text, "html.parser")
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()
    for tag in soup.find_all(True):
        if tag.name not in allowed:
            tag.unwrap()
            continue
        for attr in list(tag.attrs):
            value = tag.attrs[attr]
            if attr.lower().startswith("on") or attr.lower() == "style":
                del tag.attrs[attr]
            elif attr.lower() in URL_ATTRIBUTES and isinstance(value, str) and UNSAFE_PROTOCOLS.match(value):
                del tag.attrs[attr]
    return str(soup).strip("\n")


def filter_xss_strict(text: str) -> str:
    return filter_xss(text, allowed_tags=())


class TextTransformPipeline:
    """Named text transforms; "none" is the identity"""

    def __init__(self):
        self._transforms: Dict[str, Callable[[str], str]] = {
            HTML_TO_TEXT: html_to_text,
            FILTER_XSS: filter_xss,
            FILTER_XSS_STRICT: filter_xss_strict,
        }

    def resolve(self, name: Optional[str]) -> Optional[str]:
        """Canonical transform name, None for the identity"""
        if not name or name == "none":
            return None
        name = ALIASES.get(name, name)
        if name not in self._transforms:
            raise ConfigurationError(f"Unknown text transform: {name}")
        return name

    def has_transform(self, name: Optional[str]) -> bool:
        return self.resolve(name) is not None

    def apply(self, name: Optional[str], text: str) -> str:
        resolved = self.resolve(name)
        if resolved is None:
            return text
        return self._transforms[resolved](text)
