"""Page layout fragments: the base page, the sidebar and the modal dialog."""

from __future__ import annotations

from typing import Any, Iterable

ONLINE_CLASSES = "bg-green-100 text-green-600"
OFFLINE_CLASSES = "bg-gray-200 text-gray-600"

HTMX_SCRIPT_URL = "https://unpkg.com/htmx.org@2.0.4"
HTMX_SCRIPT_INTEGRITY = "sha384-HGfztofotfshcF7+8n44JQL2oJmowVChPTg48S+jvZoztPfvwD79OC/LTtG6dMp+"

_SVG_OPEN = (
    '<svg class="w-5 h-5 mr-3" fill="none" stroke="currentColor" '
    'viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
)

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&#39;",
    '"': "&#34;",
}

# (page key, link target, icon path, label)
_SIDEBAR_ENTRIES = (
    (
        "home",
        "/",
        "M3 12l2-2m0 0l7-7 7 7M5 10v10a1 1 0 001 1h3m10-11l2 2m-2-2v10a1 1 0 01-1 1h-3m-6 0"
        "a1 1 0 001-1v-4a1 1 0 011-1h2a1 1 0 011 1v4a1 1 0 001 1m-6 0h6",
        "Tableau de bord",
    ),
    (
        "clusters",
        "/clusters",
        "M5 12h14M5 12a2 2 0 01-2-2V6a2 2 0 012-2h14a2 2 0 012 2v4a2 2 0 01-2 2M5 12a2 2 0 00-2 2"
        "v4a2 2 0 002 2h14a2 2 0 002-2v-4a2 2 0 00-2-2m-2-4h.01M17 16h.01",
        "Clusters",
    ),
    (
        "nodes",
        "/nodes",
        "M9 3v2m6-2v2M9 19v2m6-2v2M5 9H3m2 6H3m18-6h-2m2 6h-2M7 19h10a2 2 0 002-2V7a2 2 0 00-2-2"
        "H7a2 2 0 00-2 2v10a2 2 0 002 2zM9 9h6v6H9V9z",
        "Nodes",
    ),
    (
        "vms",
        "/vms",
        "M19 11H5m14 0a2 2 0 012 2v6a2 2 0 01-2 2H5a2 2 0 01-2-2v-6a2 2 0 012-2m14 0V9a2 2 0 00-2-2"
        "M5 11V9a2 2 0 012-2m0 0V5a2 2 0 012-2h6a2 2 0 012 2v2M7 7h10",
        "Machines Virtuelles",
    ),
    (
        "lxcs",
        "/lxcs",
        "M20 7l-8-4-8 4m16 0l-8 4m8-4v10l-8 4m0-10L4 7m8 4v10M4 7v10l8 4",
        "Containers LXC",
    ),
)

_SIDEBAR_ITEM_CLASS = "block py-2 px-4 hover:bg-gray-700"
_SIDEBAR_ACTIVE_CLASS = "bg-gray-700"


def _escape(value: Any) -> str:
    """Escape text for inclusion in HTML content or a quoted attribute."""
    return "".join(_ESCAPES.get(ch, ch) for ch in str(value))


def _classes(*items: str | tuple[str, bool]) -> str:
    """Join CSS class names; a ``(name, flag)`` pair is kept only when flag is true."""
    names: list[str] = []
    for item in items:
        if isinstance(item, tuple):
            name, enabled = item
            if enabled:
                names.append(name)
        elif item:
            names.append(item)
    return " ".join(names)


def get_online(online: int) -> str:
    """Return the status colour classes for an online flag or an uptime."""
    return ONLINE_CLASSES if online > 0 else OFFLINE_CLASSES


def _sidebar_items(current_page: str) -> Iterable[str]:
    for page, href, icon, label in _SIDEBAR_ENTRIES:
        css = _classes(_SIDEBAR_ITEM_CLASS, (_SIDEBAR_ACTIVE_CLASS, current_page == page))
        yield (
            f'<li><a href="{href}" class="{_escape(css)}"><div class="flex items-center">'
            f'{_SVG_OPEN}<path stroke-linecap="round" stroke-linejoin="round" '
            f'stroke-width="2" d="{icon}"></path></svg> {label}</div></a></li>'
        )


def sidebar(current_page: str) -> str:
    """Render the navigation sidebar, highlighting ``current_page``."""
    return (
        '<div class="bg-gray-800 text-white w-64 flex-shrink-0 min-h-screen hidden md:block">'
        '<div class="p-4"><h1 class="text-xl font-bold">Proxmox Manager</h1></div>'
        '<nav class="mt-4"><ul>'
        + "".join(_sidebar_items(current_page))
        + "</ul></nav></div><!-- Mobile sidebar toggle --><div class=\"md:hidden\">"
        '<button id="sidebar-toggle" class="p-4 focus:outline-none" '
        'hx-get="/partials/sidebar-mobile" hx-target="#mobile-sidebar" hx-swap="innerHTML">'
        '<svg class="w-6 h-6" fill="none" stroke="currentColor" viewBox="0 0 24 24" '
        'xmlns="http://www.w3.org/2000/svg"><path stroke-linecap="round" '
        'stroke-linejoin="round" stroke-width="2" d="M4 6h16M4 12h16M4 18h16"></path>'
        '</svg></button><div id="mobile-sidebar"></div></div>'
    )


def base(title: str, current_page: str, children: str | None = None) -> str:
    """Render a full HTML page around ``children``, which is inserted as HTML."""
    return (
        '<!doctype html><html lang="fr"><head><meta charset="UTF-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0"><title>'
        + _escape(title)
        + " - Proxmox Manager</title>"
        '<link rel="stylesheet" href="/static/css/style.css">'
        f'<script src="{HTMX_SCRIPT_URL}" integrity="{HTMX_SCRIPT_INTEGRITY}" '
        'crossorigin="anonymous"></script></head>'
        '<body class="bg-gray-100 min-h-screen"><div class="flex"><!-- Sidebar -->'
        + sidebar(current_page)
        + '<div class="flex-1"><!-- Main content --><main class="container mx-auto px-4 py-6">'
        + (children or "")
        + "</main></div></div><!-- Modal container for HTMX interactions -->"
        '<div id="modal-container"></div></body></html>'
    )


def modal(title: str, content: str) -> str:
    """Render a modal dialog; title and content are escaped as text."""
    return (
        '<div id="modal-backdrop" class="fixed inset-0 bg-black bg-opacity-50 flex '
        'items-center justify-center z-50" hx-swap-oob="true"><div id="modal" '
        'class="bg-white rounded-lg shadow-xl p-6 w-full max-w-lg mx-4 max-h-screen '
        'overflow-y-auto"><div class="flex justify-between items-center mb-4">'
        '<h2 class="text-xl font-bold">'
        + _escape(title)
        + '</h2><button class="text-gray-400 hover:text-gray-600" '
        "onclick=\"document.getElementById(&#39;modal-backdrop&#39;).remove()\">"
        '<svg class="w-6 h-6" fill="none" stroke="currentColor" viewBox="0 0 24 24" '
        'xmlns="http://www.w3.org/2000/svg"><path stroke-linecap="round" '
        'stroke-linejoin="round" stroke-width="2" d="M6 18L18 6M6 6l12 12"></path></svg>'
        '</button></div><div class="modal-content">'
        + _escape(content)
        + "</div></div></div>"
    )