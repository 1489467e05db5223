"""
Mobile navigation menu state.

The panel's only state is whether it carries the ``hidden`` class.
Serving a page only calls :meth:`MenuController.close`. The remaining
methods are the testable model of the click rules that the browser runs
in ``static/menu.js``; keep the two in step.
"""

MENU_BUTTON_ID = "menu-btn"
MOBILE_MENU_ID = "mobile-menu"
NAV_LINK_SELECTOR = 'header a[href^="#"]'
HIDDEN_CLASS = "hidden"


def _contains(container, node) -> bool:
    """Return True when ``node`` is ``container`` or one of its descendants."""
    if node is container:
        return True
    return any(parent is container for parent in node.parents)


class MenuController:
    """Show/hide rules for the mobile navigation panel."""

    def __init__(self, button, panel, nav_links):
        self.button = button
        self.panel = panel
        self.nav_links = list(nav_links)

    @classmethod
    def from_soup(cls, soup):
        """
        Wire a controller to a parsed page.

        :returns: Controller, or None when the button or panel is missing.
        """

        button = soup.find(id=MENU_BUTTON_ID)
        panel = soup.find(id=MOBILE_MENU_ID)
        if button is None or panel is None:
            return None
        return cls(button, panel, soup.select(NAV_LINK_SELECTOR))

    @property
    def is_hidden(self) -> bool:
        return HIDDEN_CLASS in (self.panel.get("class") or [])

    def toggle(self):
        if self.is_hidden:
            self.open()
        else:
            self.close()

    def open(self):
        classes = [c for c in self.panel.get("class") or [] if c != HIDDEN_CLASS]
        if classes:
            self.panel["class"] = classes
        elif "class" in self.panel.attrs:
            del self.panel["class"]

    def close(self):
        if not self.is_hidden:
            self.panel["class"] = list(self.panel.get("class") or []) + [HIDDEN_CLASS]

    def handle_click(self, target):
        """
        Apply one click on ``target`` (an element of the same document).

        Activator clicks toggle; navigation link clicks close; any other
        click outside the panel closes it.
        """

        if _contains(self.button, target):
            self.toggle()
            return
        if any(_contains(link, target) for link in self.nav_links):
            self.close()
            return
        if not _contains(self.panel, target):
            self.close()
