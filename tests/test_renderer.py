"""Tests for the fetch-then-render pipeline."""

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from bs4 import BeautifulSoup
from lab_site import renderer
from lab_site.fetch import DocumentLoadError
from lab_site.targets import MemoryTarget, targets_from_soup

pytestmark = pytest.mark.render

SHELL = """
<div id="research-grid"></div>
<div id="publications-list"><p>Publications loading</p></div>
<div id="events-grid"><p>Events loading</p></div>
<div id="pi-section"></div>
<div id="team-grid"><div class="bg-blue-50">Join Us</div></div>
<address id="lab-address"></address>
<a id="contact-email" href="#"></a>
"""


def _sample_document():
    """Return a small, complete data document."""
    return {
        "piName": "Ada Lovelace",
        "researchPillars": [
            {"iconSvg": "<svg></svg>", "title": "Engines", "description": "D1"},
            {"iconSvg": "<svg></svg>", "title": "Symbols", "description": "D2"},
            {"iconSvg": "<svg></svg>", "title": "Music", "description": "D3"},
        ],
        "publications": [
            {"title": "P1", "authors": ["Ada Lovelace", "Charles Babbage"], "journal": "J1", "url": "u1"},
            {"title": "P2", "authors": ["Mary Somerville", "Ada Lovelace-Byron"], "journal": "J2"},
            {"title": "P3", "authors": ["Luigi Menabrea", "Ada Lovelace"], "journal": "J3", "url": "u3"},
        ],
        "events": [
            {"day": "1", "month": "Jan", "title": "E1", "description": "With [[PI_NAME]]", "location": "L1"},
            {"day": "2", "month": "Feb", "title": "E2", "description": "Plain", "location": "L2"},
        ],
        "team": {
            "principalInvestigator": {
                "name": "Ada Lovelace",
                "title": "PI",
                "bio": "Bio",
                "imageUrl": "ada.png",
                "bioUrl": "bio",
            },
            "members": [
                {"name": "Charles Babbage", "title": "Scientist", "imageUrl": "cb.png"},
                {"name": "Mary Somerville", "title": "Student", "imageUrl": "ms.png"},
            ],
        },
        "contactInfo": {"address": ["Lab", "Hall"], "email": "lab@example.org"},
    }


def _soup():
    return BeautifulSoup(SHELL, "html.parser")


def test_render_sections_writes_one_card_per_entry_in_order():
    """Every array entry becomes one card, in document order."""
    soup = _soup()
    rendered = renderer.render_sections(_sample_document(), targets_from_soup(soup))
    assert rendered == list(renderer.SECTION_ORDER)

    pillars = soup.select('#research-grid [data-card="research-pillar"] h3')
    assert [h3.get_text(strip=True) for h3 in pillars] == ["Engines", "Symbols", "Music"]
    pubs = soup.select('#publications-list [data-card="publication"] h3')
    assert [h3.get_text(strip=True) for h3 in pubs] == ["P1", "P2", "P3"]
    assert len(soup.select('#events-grid [data-card="event"]')) == 2
    assert len(soup.select('#pi-section [data-card="principal-investigator"]')) == 1


def test_publications_emphasize_exact_pi_matches_only():
    """K publications with an exact PI author give K bold spans."""
    soup = _soup()
    renderer.render_sections(_sample_document(), targets_from_soup(soup))
    spans = soup.select("#publications-list span.font-bold")
    assert [span.get_text() for span in spans] == ["Ada Lovelace", "Ada Lovelace"]
    assert "Ada Lovelace-Byron" in soup.find(id="publications-list").get_text()

    counts = []
    for card in soup.select('#publications-list [data-card="publication"]'):
        authors = card.find("p")
        names = [name.strip() for name in authors.get_text().split(",")]
        bold = [span.get_text() for span in authors.select("span.font-bold")]
        plain = [name for name in names if name not in bold]
        counts.append((len(bold), len(plain)))
    assert counts == [(1, 1), (0, 2), (1, 1)]

    total_authors = sum(len(pub["authors"]) for pub in _sample_document()["publications"])
    assert sum(plain for _, plain in counts) == total_authors - len(spans)


def test_events_use_pi_short_name():
    """The placeholder becomes "Dr. Lovelace" for PI "Ada Lovelace"."""
    soup = _soup()
    renderer.render_sections(_sample_document(), targets_from_soup(soup))
    text = soup.find(id="events-grid").get_text()
    assert "With Dr. Lovelace" in text
    assert "[[PI_NAME]]" not in text


def test_team_members_precede_join_card():
    """Members sit immediately before the single join-us card."""
    soup = _soup()
    renderer.render_sections(_sample_document(), targets_from_soup(soup))
    children = soup.find(id="team-grid").find_all(recursive=False)
    assert [child.get("data-card") for child in children] == ["team-member", "team-member", None]
    assert children[-1].get_text() == "Join Us"


def test_contact_block_fills_address_and_email():
    """Address lines are joined with <br> and the email anchor is populated."""
    soup = _soup()
    renderer.render_sections(_sample_document(), targets_from_soup(soup))
    assert soup.find(id="lab-address").decode_contents() == "Lab<br/>Hall"
    email = soup.find(id="contact-email")
    assert email["href"] == "mailto:lab@example.org"
    assert email.get_text() == "lab@example.org"


def test_missing_containers_are_skipped():
    """Steps without a container are skipped, not fatal."""
    soup = BeautifulSoup('<div id="research-grid"></div>', "html.parser")
    rendered = renderer.render_sections(_sample_document(), targets_from_soup(soup))
    assert rendered == ["research"]


def test_document_without_contact_info_skips_contact():
    """The contact step is skipped when the document has no contactInfo."""
    document = _sample_document()
    del document["contactInfo"]
    soup = _soup()
    rendered = renderer.render_sections(document, targets_from_soup(soup))
    assert "contact" not in rendered
    assert soup.find(id="contact-email")["href"] == "#"


def test_render_twice_is_identical():
    """Rendering the same document twice produces identical fragments and pages."""
    first = {name: MemoryTarget() for name in ("research", "publications", "events", "pi", "team", "address", "email")}
    second = {name: MemoryTarget() for name in first}
    renderer.render_sections(_sample_document(), first)
    renderer.render_sections(_sample_document(), second)
    assert {k: str(v) for k, v in first.items()} == {k: str(v) for k, v in second.items()}

    soup = _soup()
    targets = targets_from_soup(soup)
    renderer.render_sections(_sample_document(), targets)
    once = str(soup)
    renderer.render_sections(_sample_document(), targets)
    assert str(soup) == once


def test_load_and_render_success_passes_base_url():
    """The fetch receives the source and base URL, and sections render."""
    calls = {}

    def fake_fetch(source, base_url=None):
        calls["source"] = source
        calls["base_url"] = base_url
        return _sample_document()

    soup = _soup()
    ok = renderer.load_and_render(
        targets_from_soup(soup), "./data.json", fetch_fn=fake_fetch, base_url="http://lab/"
    )
    assert ok is True
    assert calls == {"source": "./data.json", "base_url": "http://lab/"}
    assert len(soup.select('[data-card="team-member"]')) == 2


def test_load_and_render_failure_only_touches_research(caplog):
    """A load failure writes one message into research and leaves the rest."""
    def failing_fetch(source, base_url=None):
        raise DocumentLoadError(source, "HTTP error! status: 500")

    soup = _soup()
    with caplog.at_level(logging.ERROR, logger=renderer.LOGGER.name):
        ok = renderer.load_and_render(targets_from_soup(soup), "./data.json", fetch_fn=failing_fetch)

    assert ok is False
    assert soup.find(id="research-grid").get_text() == "Failed to load research data."
    assert soup.find(id="research-grid").find("p")["class"] == ["text-red-500"]
    assert soup.find(id="publications-list").get_text() == "Publications loading"
    assert soup.find(id="events-grid").get_text() == "Events loading"
    assert soup.find(id="team-grid").get_text() == "Join Us"
    assert "Failed to load lab data" in caplog.text


def test_load_and_render_failure_without_research_container():
    """A failure with no research container writes nothing and does not raise."""
    def failing_fetch(source, base_url=None):
        raise DocumentLoadError(source, "boom")

    target = MemoryTarget("kept")
    assert renderer.load_and_render({"team": target}, "x", fetch_fn=failing_fetch) is False
    assert str(target) == "kept"
