"""
Pure HTML renderers for each section of the lab page.

Every function here maps one entry of the data document to a markup
string. Text fields and URLs are escaped; only ``iconSvg`` is trusted
markup and is emitted verbatim.
"""

from markupsafe import escape


PI_PLACEHOLDER = "[[PI_NAME]]"
PI_TITLE_PREFIX = "Dr."
PLACEHOLDER_PHOTO_URL = "https://placehold.co/300x300/E5E7EB/374151?text=Photo"
LOAD_ERROR_HTML = "<p class='text-red-500'>Failed to load research data.</p>"

SCHOLAR_PATH = (
    '<path d="M12 24a7 7 0 1 1 0-14 7 7 0 0 1 0 14zm0-24L0 9.5l4.838 '
    '3.39L12 18l7.162-5.11L24 9.5z"/>'
)
GITHUB_PATH = (
    '<path d="M8 0C3.58 0 0 3.58 0 8c0 3.54 2.29 6.53 5.47 7.59.4.07.55-.17'
    '.55-.38 0-.19-.01-.82-.01-1.49-2.01.37-2.53-.49-2.69-.94-.09-.23-.48-.94'
    '-.82-1.13-.28-.15-.68-.52-.01-.53.63-.01 1.08.58 1.23.82.72 1.21 1.87.87 '
    '2.33.66.07-.52.28-.87.51-1.07-1.78-.2-3.64-.89-3.64-3.95 0-.87.31-1.59.82'
    '-2.15-.08-.2-.36-1.02.08-2.12 0 0 .67-.21 2.2.82.64-.18 1.32-.27 2-.27.68 '
    '0 1.36.09 2 .27 1.53-1.04 2.2-.82 2.2-.82.44 1.1.16 1.92.08 2.12.51.56.82 '
    '1.27.82 2.15 0 3.07-1.87 3.75-3.65 3.95.29.25.54.73.54 1.48 0 1.07-.01 '
    '1.93-.01 2.2 0 .21.15.46.55.38A8.013 8.013 0 0 0 16 8c0-4.42-3.58-8-8-8z"/>'
)
LOCATION_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="h-4 w-4 mr-1.5" fill="none" '
    'viewBox="0 0 24 24" stroke="currentColor" stroke-width="2">'
    '<path stroke-linecap="round" stroke-linejoin="round" d="M17.657 16.657L13.414 '
    '20.9a1.998 1.998 0 01-2.827 0l-4.244-4.243a8 8 0 1111.314 0z" />'
    '<path stroke-linecap="round" stroke-linejoin="round" d="M15 11a3 3 0 11-6 0 '
    '3 3 0 016 0z" /></svg>'
)


def _text(value) -> str:
    """Escape a field for HTML, treating None as empty."""
    if value is None:
        return ""
    return str(escape(value))


def _scholar_icon(size: str) -> str:
    return f'<svg fill="currentColor" class="{size}" viewBox="0 0 24 24">{SCHOLAR_PATH}</svg>'


def _github_icon(size: str) -> str:
    return f'<svg fill="currentColor" class="{size}" viewBox="0 0 16 16">{GITHUB_PATH}</svg>'


def _profile_links(person: dict, link_class: str, icon_size: str) -> str:
    """
    Render the Scholar and GitHub links that are present on ``person``.

    :param person: PI or team member entry.
    :param link_class: CSS classes for each anchor.
    :param icon_size: CSS size classes for the icons.
    :returns: Markup for zero, one, or two anchors.
    """

    links = []
    for field, icon in (("scholarUrl", _scholar_icon), ("githubUrl", _github_icon)):
        url = person.get(field)
        if url:
            links.append(
                f'<a href="{_text(url)}" target="_blank" rel="noopener noreferrer" '
                f'class="{link_class}">{icon(icon_size)}</a>'
            )
    return "\n".join(links)


def is_pi_author(author, pi_name) -> bool:
    """
    Return True when ``author`` names the principal investigator.

    Matching is exact equality after trimming surrounding whitespace, so a
    co-author whose name merely contains the PI's name is not emphasized.
    """

    if not author or not pi_name:
        return False
    return str(author).strip() == str(pi_name).strip()


def pi_short_name(full_name) -> str:
    """
    Derive the short display form of the PI's name.

    The full name is split on whitespace and the second token is used, so
    "Ada Lovelace" becomes "Dr. Lovelace". A single-token name uses that
    token; an empty name yields the bare prefix.
    """

    tokens = str(full_name or "").split()
    if len(tokens) >= 2:
        return f"{PI_TITLE_PREFIX} {tokens[1]}"
    if tokens:
        return f"{PI_TITLE_PREFIX} {tokens[0]}"
    return PI_TITLE_PREFIX


def render_research_pillar(pillar: dict) -> str:
    """Render one research pillar card."""
    return f"""
    <div data-card="research-pillar" class="bg-white dark:bg-gray-900 p-8 rounded-lg shadow-lg border border-gray-200 dark:border-gray-700">
        <div class="text-blue-500 dark:text-blue-400 mb-4">
            {pillar.get("iconSvg") or ""}
        </div>
        <h3 class="text-2xl font-semibold text-gray-900 dark:text-white mb-3">
            {_text(pillar.get("title"))}
        </h3>
        <p class="text-gray-600 dark:text-gray-400">
            {_text(pillar.get("description"))}
        </p>
    </div>"""


def render_authors(authors, pi_name) -> str:
    """Join authors with ", ", emphasizing the PI."""
    rendered = []
    for author in authors or []:
        if is_pi_author(author, pi_name):
            rendered.append(
                f'<span class="font-bold text-gray-700 dark:text-gray-200">{_text(author)}</span>'
            )
        else:
            rendered.append(_text(author))
    return ", ".join(rendered)


def render_publication(publication: dict, pi_name) -> str:
    """Render one publication card; the title links to ``url`` when present."""
    title = (
        f'<h3 class="text-xl font-semibold text-gray-900 dark:text-white">'
        f'{_text(publication.get("title"))}</h3>'
    )
    url = publication.get("url")
    if url:
        title = (
            f'<a href="{_text(url)}" target="_blank" rel="noopener noreferrer" '
            f'class="hover:underline">\n            {title}\n        </a>'
        )

    return f"""
    <div data-card="publication" class="bg-gray-50 dark:bg-gray-800 p-6 rounded-lg border border-gray-200 dark:border-gray-700 transition-shadow hover:shadow-lg">
        {title}
        <p class="text-gray-500 dark:text-gray-400 mt-2">
            {render_authors(publication.get("authors"), pi_name)}
        </p>
        <p class="text-gray-600 dark:text-gray-300 italic mt-1">
            {_text(publication.get("journal"))}
        </p>
    </div>"""


def render_event(event: dict, short_name: str) -> str:
    """
    Render one event card.

    Every placeholder token in the description is replaced with
    ``short_name`` after escaping.
    """

    description = _text(event.get("description")).replace(
        _text(PI_PLACEHOLDER), _text(short_name)
    )

    return f"""
    <div data-card="event" class="bg-white dark:bg-gray-900 p-6 rounded-lg shadow-lg border border-gray-200 dark:border-gray-700 flex space-x-6">
        <div class="flex-shrink-0 text-center bg-blue-50 dark:bg-gray-800 p-4 rounded-lg border border-gray-200 dark:border-gray-700">
            <span class="block text-3xl font-bold text-blue-600 dark:text-blue-400">{_text(event.get("day"))}</span>
            <span class="block text-sm font-semibold text-gray-700 dark:text-gray-300 uppercase">{_text(event.get("month"))}</span>
        </div>
        <div>
            <h3 class="text-xl font-semibold text-gray-900 dark:text-white">{_text(event.get("title"))}</h3>
            <p class="text-gray-500 dark:text-gray-400 mt-1">{description}</p>
            <span class="inline-flex items-center text-sm text-gray-600 dark:text-gray-300 mt-2">
                {LOCATION_ICON}
                {_text(event.get("location"))}
            </span>
        </div>
    </div>"""


def render_pi(pi: dict) -> str:
    """Render the principal investigator detail card."""
    links = _profile_links(
        pi, "hover:text-blue-500 dark:hover:text-blue-400", "w-5 h-5"
    )

    return f"""
    <div data-card="principal-investigator" class="bg-white dark:bg-gray-900 rounded-lg shadow-xl overflow-hidden md:flex border border-gray-200 dark:border-gray-700">
        <div class="md:flex-shrink-0">
            <img class="h-48 w-full object-cover md:h-full md:w-64" src="{_text(pi.get("imageUrl"))}" alt="{_text(pi.get("name"))}">
        </div>
        <div class="p-8">
            <div class="flex justify-between items-start">
                <div>
                    <h3 class="text-2xl font-bold text-gray-900 dark:text-white">{_text(pi.get("name"))}</h3>
                    <p class="text-blue-500 dark:text-blue-400 text-lg font-medium mb-4">{_text(pi.get("title"))}</p>
                </div>
                <div class="flex space-x-3 text-gray-500 dark:text-gray-400">
                    {links}
                </div>
            </div>
            <p class="text-gray-600 dark:text-gray-400 mb-4">
                {_text(pi.get("bio"))}
            </p>
            <a href="{_text(pi.get("bioUrl"))}" class="text-blue-500 dark:text-blue-400 hover:underline font-medium">View Full Bio &rarr;</a>
        </div>
    </div>"""


def render_team_member(member: dict) -> str:
    """Render one team member card with a hover overlay for profile links."""
    links = _profile_links(member, "hover:text-blue-400 transition-colors", "w-6 h-6")

    return f"""
    <div data-card="team-member" class="group relative text-center bg-white dark:bg-gray-900 rounded-lg shadow-lg border border-gray-200 dark:border-gray-700 overflow-hidden">
        <img class="w-full h-48 object-cover" src="{_text(member.get("imageUrl"))}" alt="{_text(member.get("name"))}" onerror="this.src='{PLACEHOLDER_PHOTO_URL}';">
        <div class="p-4">
            <h4 class="text-xl font-semibold text-gray-900 dark:text-white">{_text(member.get("name"))}</h4>
            <p class="text-gray-500 dark:text-gray-400">{_text(member.get("title"))}</p>
        </div>
        <div class="team-card-overlay absolute inset-0 flex flex-col justify-center items-center space-y-4 text-white opacity-0 group-hover:opacity-100 transition-opacity duration-300">
            {links}
        </div>
    </div>"""


def render_address(lines) -> str:
    """Join address lines with a line break."""
    return "<br>".join(_text(line) for line in lines or [])


def email_link(email):
    """
    Return the ``(href, text)`` pair for the contact email anchor.

    The text is returned unescaped; the target writes it as a text node.
    """

    email = str(email or "").strip()
    return f"mailto:{email}", email
