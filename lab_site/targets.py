"""
Render targets: the containers the renderer writes into.

The renderer never looks up page elements itself. It receives a mapping
from section name to a target object and only calls the methods below,
so it can run against a parsed page or a plain in-memory recorder.
"""

from bs4 import BeautifulSoup, NavigableString


SECTION_CONTAINER_IDS = {
    "research": "research-grid",
    "publications": "publications-list",
    "events": "events-grid",
    "pi": "pi-section",
    "team": "team-grid",
    "address": "lab-address",
    "email": "contact-email",
}
JOIN_US_SELECTOR = ".bg-blue-50"
TEAM_MEMBER_SELECTOR = '[data-card="team-member"]'


def _parse_fragment(fragment: str):
    """Parse an HTML fragment into detached nodes, dropping blank text between cards."""
    return [
        node
        for node in BeautifulSoup(fragment, "html.parser").contents
        if not (isinstance(node, NavigableString) and not node.strip())
    ]


class SoupTarget:
    """Target backed by one element of a BeautifulSoup document."""

    def __init__(self, tag):
        self.tag = tag

    def replace(self, fragment: str):
        """Replace the element's children with ``fragment``."""
        self.tag.clear()
        for node in _parse_fragment(fragment):
            self.tag.append(node)

    def insert_before_anchor(self, fragment: str, selector: str = JOIN_US_SELECTOR) -> bool:
        """
        Insert ``fragment`` immediately before the anchor matching ``selector``.

        Member cards from an earlier render are dropped first. Without an
        anchor the fragment becomes the element's full content.

        :returns: True if the anchor was found.
        """

        for stale in self.tag.select(TEAM_MEMBER_SELECTOR):
            stale.decompose()

        anchor = self.tag.select_one(selector)
        if anchor is None:
            self.replace(fragment)
            return False

        for node in _parse_fragment(fragment):
            anchor.insert_before(node)
        return True

    def set_link(self, href: str, text: str):
        """Point an anchor element at ``href`` and show ``text``."""
        self.tag["href"] = href
        self.tag.string = text

    def __str__(self):
        return self.tag.decode_contents()


class MemoryTarget:
    """Target that records writes; used where no page is available."""

    def __init__(self, content: str = ""):
        self.content = content
        self.href = None

    def replace(self, fragment: str):
        self.content = fragment

    def insert_before_anchor(self, fragment: str, selector: str = JOIN_US_SELECTOR) -> bool:
        self.content = fragment
        return False

    def set_link(self, href: str, text: str):
        self.href = href
        self.content = text

    def __str__(self):
        return self.content


def targets_from_soup(soup) -> dict:
    """
    Build the section-to-target mapping for a parsed page.

    :param soup: Parsed page (:class:`bs4.BeautifulSoup`).
    :returns: Dict keyed by section name; missing containers are omitted.
    """

    targets = {}
    for section, container_id in SECTION_CONTAINER_IDS.items():
        tag = soup.find(id=container_id)
        if tag is not None:
            targets[section] = SoupTarget(tag)
    return targets
