# ABOUTME: Removes citation-note anchors from a parsed document
# ABOUTME: Keeps footnote markers like "[7]" out of extracted cell text

from bs4 import Tag

from mcc_mnc_harvest.extraction.base import MissingAttributeError

CITE_NOTE_PREFIX = "#cite_note"


def strip_references(root: Tag) -> Tag:
    """Remove every citation-note link under root, in place.

    The caller must own the tree: this mutates it and returns the same root.

    Raises:
        MissingAttributeError: If a link has no href.
    """
    for link in root.find_all("a"):
        href = link.get("href")
        if href is None:
            raise MissingAttributeError(f"Link without href: {str(link)[:80]}")
        if href.startswith(CITE_NOTE_PREFIX):
            link.decompose()

    return root
