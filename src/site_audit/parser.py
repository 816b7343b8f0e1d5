"""HTML parsing for the checks.

Wraps BeautifulSoup so that every lookup degrades to "not found" instead of
raising, whatever the markup looks like.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class Document:
    """Queryable parsed page."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def find(self, tag: str, **attrs) -> Optional[Tag]:
        """First element by tag name and attribute filters."""
        try:
            return self.soup.find(tag, attrs=attrs or {})
        except Exception as e:
            logger.debug("find(%s) failed: %s", tag, e)
            return None

    def find_all(self, tag: str, **attrs) -> list[Tag]:
        try:
            return list(self.soup.find_all(tag, attrs=attrs or {}))
        except Exception as e:
            logger.debug("find_all(%s) failed: %s", tag, e)
            return []

    def select(self, selector: str) -> list[Tag]:
        """Elements matching a CSS selector (soupsieve)."""
        try:
            return list(self.soup.select(selector))
        except Exception as e:
            logger.debug("select(%r) failed: %s", selector, e)
            return []

    def select_one(self, selector: str) -> Optional[Tag]:
        found = self.select(selector)
        return found[0] if found else None

    def attr(self, selector: str, name: str) -> str:
        """Stripped attribute of the first match, or an empty string."""
        element = self.select_one(selector)
        if element is None:
            return ""
        value = element.get(name)
        if isinstance(value, list):  # class, rel
            value = " ".join(value)
        return (value or "").strip()

    def text(self, tag: str) -> str:
        element = self.find(tag)
        return element.get_text(strip=True) if element is not None else ""

    def meta(self, name: str) -> str:
        """Content of ``<meta name=...>``, case-insensitive on the name."""
        return self.attr(f'meta[name="{name}" i]', "content")


def parse(html: str) -> Document:
    """Parse HTML into a Document. Never raises.

    lxml lower-cases tag and attribute names, which gives HTML's
    case-insensitive matching for free.
    """
    try:
        soup = BeautifulSoup(html or "", "lxml")
    except Exception as e:
        logger.debug("lxml could not parse document, using empty tree: %s", e)
        soup = BeautifulSoup("", "html.parser")
    return Document(soup)
