"""The dashboard page and its summary counters."""

from __future__ import annotations

from .layout import base

_DASHBOARD_BODY = (
    '<div class="bg-white rounded-lg shadow-md p-6">'
    '<h1 class="text-2xl font-bold mb-6">Tableau de bord Proxmox</h1>'
    "<!-- Summary cards -->"
    '<div hx-get="/clusters/dashboard-count" hx-swap="outerHTML" hx-trigger="load"></div>'
    "<!-- Recent clusters -->"
    '<div class="mb-6" hx-get="/nodes" hx-swap="outerHTML" hx-trigger="load"></div>'
    "<!-- Recent nodes -->"
    '<div class="mb-6" hx-get="/nodes/lxc" hx-swap="outerHTML" hx-trigger="load"></div>'
    '<div class="mb-6" hx-get="/nodes/vm" hx-swap="outerHTML" hx-trigger="load"></div>'
    "</div>"
)

# (colour of the card, label)
_COUNT_CARDS = (
    ("blue", "Clusters"),
    ("green", "Nodes"),
    ("purple", "VMs"),
    ("orange", "Containers LXC"),
)


def dashboard(title: str, current_page: str) -> str:
    """Render the dashboard page; its sections are loaded by HTMX requests."""
    return base(title, current_page, _DASHBOARD_BODY)


def _count_card(colour: str, label: str, count: int) -> str:
    value = f"<p>{int(count)}</p>" if count > 0 else "<p>...</p>"
    return (
        f'<div class="bg-{colour}-50 p-4 rounded-lg shadow">'
        f'<h2 class="text-lg font-semibold text-{colour}-700">{label}</h2>'
        f"{value}</div>"
    )


def dashboard_count(
    count_clusters: int, count_nodes: int, count_vms: int, count_lxcs: int
) -> str:
    """Render the four summary cards; a count of zero or less shows ``...``."""
    counts = (count_clusters, count_nodes, count_vms, count_lxcs)
    cards = "".join(
        _count_card(colour, label, count)
        for (colour, label), count in zip(_COUNT_CARDS, counts)
    )
    return (
        '<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-4 gap-4 mb-6">'
        + cards
        + "</div>"
    )