"""
Load the lab data document and render every section of the page.

:func:`load_and_render` performs the one fetch, then hands the document
to :func:`render_sections`, which runs each render step against its own
target. A step whose target is missing is skipped.
"""

import logging

from . import cards
from .fetch import DocumentLoadError, fetch_document


LOGGER = logging.getLogger(__name__)
SECTION_ORDER = ("research", "publications", "events", "pi", "team", "contact")


def render_research(document, targets):
    target = targets.get("research")
    if target is None:
        return False
    pillars = document.get("researchPillars") or []
    target.replace("".join(cards.render_research_pillar(pillar) for pillar in pillars))
    return True


def render_publications(document, targets):
    target = targets.get("publications")
    if target is None:
        return False
    pi_name = document.get("piName")
    publications = document.get("publications") or []
    target.replace("".join(cards.render_publication(pub, pi_name) for pub in publications))
    return True


def _principal_investigator(document) -> dict:
    team = document.get("team") or {}
    return team.get("principalInvestigator") or {}


def render_events(document, targets):
    target = targets.get("events")
    if target is None:
        return False
    short_name = cards.pi_short_name(_principal_investigator(document).get("name"))
    events = document.get("events") or []
    target.replace("".join(cards.render_event(event, short_name) for event in events))
    return True


def render_principal_investigator(document, targets):
    target = targets.get("pi")
    if target is None:
        return False
    target.replace(cards.render_pi(_principal_investigator(document)))
    return True


def render_team(document, targets):
    """Insert member cards before the join-us card, or fill the grid."""
    target = targets.get("team")
    if target is None:
        return False
    members = (document.get("team") or {}).get("members") or []
    target.insert_before_anchor("".join(cards.render_team_member(m) for m in members))
    return True


def render_contact(document, targets):
    """Fill the address block and the email anchor when contact info exists."""
    contact = document.get("contactInfo")
    if not contact:
        return False

    rendered = False
    address_target = targets.get("address")
    if address_target is not None:
        address_target.replace(cards.render_address(contact.get("address")))
        rendered = True
    email_target = targets.get("email")
    if email_target is not None:
        email_target.set_link(*cards.email_link(contact.get("email")))
        rendered = True
    return rendered


RENDER_STEPS = {
    "research": render_research,
    "publications": render_publications,
    "events": render_events,
    "pi": render_principal_investigator,
    "team": render_team,
    "contact": render_contact,
}


def render_sections(document: dict, targets: dict) -> list:
    """
    Run every render step in fixed order.

    :param document: Parsed data document.
    :param targets: Mapping of section name to render target.
    :returns: Names of the sections that were written.
    """

    rendered = []
    for section in SECTION_ORDER:
        if RENDER_STEPS[section](document, targets):
            rendered.append(section)
    LOGGER.debug("Rendered sections: %s", ", ".join(rendered) or "none")
    return rendered


def show_load_error(targets):
    """Write the fallback message into the research container only."""
    target = targets.get("research")
    if target is not None:
        target.replace(cards.LOAD_ERROR_HTML)


def load_and_render(targets: dict, source, fetch_fn=fetch_document, base_url=None) -> bool:
    """
    Fetch the data document once and render it into ``targets``.

    On a load failure nothing is rendered except the fallback message in
    the research container; the error is logged, not raised.

    :param targets: Mapping of section name to render target.
    :param source: Location of the data document.
    :param fetch_fn: Callable ``(source, base_url=...) -> dict``.
    :param base_url: Base URL for a relative ``source``.
    :returns: True on success, False on failure.
    """

    try:
        document = fetch_fn(source, base_url=base_url)
    except DocumentLoadError:
        LOGGER.exception("Failed to load lab data")
        show_load_error(targets)
        return False

    render_sections(document, targets)
    return True
