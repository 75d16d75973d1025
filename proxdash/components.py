"""HTML fragments for cluster status cards and per-resource dashboard cards."""

from __future__ import annotations

from typing import Iterable

from .formatting import transform_bytes_for_human
from .layout import _classes, _escape, get_online
from .models import Cluster, ClusterResource

_MONITOR_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="h-6 w-6" fill="none" '
    'viewBox="0 0 24 24" stroke="currentColor"><path stroke-linecap="round" '
    'stroke-linejoin="round" stroke-width="2" d="M9.75 17L9 20l-1 1h8l-1-1-.75-3M3 13h18'
    'M5 17h14a2 2 0 002-2V5a2 2 0 00-2-2H5a2 2 0 00-2 2v10a2 2 0 002 2z"></path></svg>'
)

_CARD_CLASS = "bg-blue-50 p-4 rounded-lg shadow mb-4 transition-all duration-300 hover:shadow-md"
_ICON_CLASSES = ("h-12", "w-12", "rounded-full", "flex", "items-center", "justify-center")

_GRID_OPEN = (
    '<div id="recent-clusters" class="grid grid-cols-1 xl:grid-cols-2 '
    '2xl:grid-cols-3 gap-4">'
)

_REQUIRED_RESOURCE_FIELDS = ("uptime", "name", "id", "maxcpu", "cpu", "maxmem", "mem", "maxdisk", "disk")


def _field(label: str, value: str) -> str:
    return (
        f'<div><span class="font-medium text-gray-600">{label}:</span> '
        f'<span class="text-gray-800">{_escape(value)}</span></div>'
    )


def _status_icon(status_classes: str) -> str:
    css = _classes(*_ICON_CLASSES, status_classes)
    return (
        '<!-- Statut avec couleur adaptative --><div class="flex-shrink-0">'
        f'<div class="{_escape(css)}">{_MONITOR_ICON}</div></div>'
    )


def card_node(node: Cluster) -> str:
    """Render one entry of the cluster status list as a card."""
    status_classes = get_online(node.online)
    badge_css = _classes("rounded px-2 py-1 text-xs", status_classes)
    state = "Hors ligne" if node.online == 0 else "En ligne"
    return (
        f'<div class="{_CARD_CLASS}"><div class="flex items-center space-x-4">'
        + _status_icon(status_classes)
        + '<!-- Contenu principal --><div class="flex-1">'
        '<h2 class="text-lg font-semibold text-blue-700">'
        + _escape(node.name)
        + '</h2><div class="grid grid-cols-2 gap-2 mt-2 text-sm">'
        + _field("ID", node.id)
        + '<div><span class="font-medium text-gray-600">Statut:</span> '
        f'<span class="{_escape(badge_css)}">{state}</span></div>'
        + _field("IP", node.ip)
        + _field("Local", str(node.local))
        + "</div></div></div></div>"
    )


def cluster_status(cluster_list: Iterable[Cluster]) -> str:
    """Render the "Nodes" section holding one card per status entry."""
    return (
        '<div class="mb-6"><div class="flex justify-between items-center mb-4">'
        '<h2 class="text-xl font-bold">Nodes</h2>'
        '<a href="/clusters" class="text-blue-600 hover:text-blue-800">Voir tous</a></div>'
        + _GRID_OPEN
        + "".join(card_node(node) for node in cluster_list)
        + "</div></div>"
    )


def dashboard_node(node: ClusterResource) -> str:
    """Render a card for one VM, container or node resource.

    Raises ValueError when a field the card displays is missing.
    """
    missing = [name for name in _REQUIRED_RESOURCE_FIELDS if getattr(node, name) is None]
    if missing:
        raise ValueError(f"resource is missing fields: {', '.join(missing)}")

    status_classes = get_online(node.uptime)
    card_css = _classes(_CARD_CLASS, status_classes)
    return (
        f'<div class="{_escape(card_css)}"><div class="flex items-center space-x-4">'
        + _status_icon(status_classes)
        + '<!-- Contenu principal --><div class="flex-1">'
        '<h2 class="text-lg font-semibold text-blue-700">'
        + _escape(node.name)
        + '</h2><div class="grid grid-cols-2 gap-2 mt-2 text-sm">'
        + _field("ID", node.id)
        + "<div></div>"
        + _field("Nb CPU", f"{int(node.maxcpu)}")
        + _field("CPU", f"{node.cpu * 100:.2f}")
        + _field("Max Mem", transform_bytes_for_human(node.maxmem, 0))
        + _field("Mem", transform_bytes_for_human(node.mem, 2))
        + _field("Max Disk", transform_bytes_for_human(node.maxdisk, 0))
        + _field("Disk", transform_bytes_for_human(node.disk, 2))
        + "</div></div></div></div>"
    )


def dashboard_nodes(title: str, resources: Iterable[ClusterResource]) -> str:
    """Render a titled section with a card for every resource that has a name."""
    return (
        '<div class="mb-6"><div class="flex justify-between items-center mb-4">'
        '<h2 class="text-xl font-bold">'
        + _escape(title)
        + "</h2></div>"
        + _GRID_OPEN
        + "".join(dashboard_node(r) for r in resources if r.name is not None)
        + "</div></div>"
    )