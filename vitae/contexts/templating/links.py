"""
Inline hyperlink handling.

Rendered text never carries inline Markdown links (``[text](url)``). For HTML
output the link is dropped and its text kept. For PDF export, where links can't
be clicked, the text is kept with a superscript number and the URL is deferred
to a numbered list printed at the end of the document.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from vitae.utils.text_processing import extract_balanced_delimiters


@dataclass
class LinkCollector:
    """
    Ordered URLs deferred to the document's link list.

    Numbering is 1-based in order of first appearance. A URL seen again reuses
    its number.
    """

    urls: List[str] = field(default_factory=list)

    def add(self, url: str) -> int:
        """Record a URL and return its footnote number."""
        if url in self.urls:
            return self.urls.index(url) + 1
        self.urls.append(url)
        return len(self.urls)

    def __len__(self) -> int:
        return len(self.urls)


def sanitize_links(text: Optional[str], links: Optional[LinkCollector] = None) -> Optional[str]:
    """
    Remove inline Markdown links from text.

    Args:
        text: Text possibly containing ``[display](url)`` links
        links: Collector for PDF export. None drops the URLs.

    Returns:
        Text with each link replaced by its display text, followed by
        ``<sup>n</sup>`` when a collector is given. None passes through.

    Example:
        >>> sanitize_links("See [my site](https://example.com).")
        'See my site.'
    """
    if not text:
        return text

    result = text
    search_from = 0

    while True:
        pos = result.find("[", search_from)
        if pos == -1:
            break

        # Unbalanced brackets, e.g. "[0, 1)"
        try:
            display, display_end = extract_balanced_delimiters(result, pos + 1)
        except ValueError:
            search_from = pos + 1
            continue

        # Plain brackets, not a link
        if display_end >= len(result) or result[display_end] != "(":
            search_from = pos + 1
            continue

        try:
            url, url_end = extract_balanced_delimiters(result, display_end + 1, "(", ")")
        except ValueError:
            search_from = pos + 1
            continue

        replacement = display.strip()
        # No display text, nothing to anchor a footnote to
        if links is not None and replacement and url.strip():
            replacement += f"<sup>{links.add(url.strip())}</sup>"

        result = result[:pos] + replacement + result[url_end:]
        # Display text may itself contain a link
        search_from = pos

    return result


def has_inline_link(text: Optional[str]) -> bool:
    """Check whether text still contains ``[display](url)`` syntax."""
    if not text:
        return False
    return sanitize_links(text) != text
