"""Page and fragment handlers of the dashboard."""

from __future__ import annotations

from .components import cluster_status, dashboard_nodes
from .dashboard import dashboard, dashboard_count
from .models import ResourceType
from .service import Service


class Handlers:
    """Renders pages and HTMX fragments from the data held by a service."""

    def __init__(self, service: Service) -> None:
        self.service = service

    def index(self) -> str:
        """Render the home page."""
        return dashboard("Tableau de bord", "dashboard-home")

    def clusters_status_card(self) -> str:
        """Render the cluster status cards."""
        return cluster_status(self.service.get_clusters_info())

    def dashboard_node_lxc_list(self) -> str:
        """Render the list of LXC containers."""
        return dashboard_nodes(
            "LXC", self.service.dashboard_get_node_lxc_or_vm(ResourceType.LXC)
        )

    def dashboard_node_vm_list(self) -> str:
        """Render the list of virtual machines."""
        return dashboard_nodes(
            "VM", self.service.dashboard_get_node_lxc_or_vm(ResourceType.QEMU)
        )

    def dashboard_count(self) -> str:
        """Render the summary counters."""
        return dashboard_count(
            self.service.get_cluster_count(),
            self.service.count_clusters_by_type(ResourceType.NODE),
            self.service.count_clusters_by_type(ResourceType.QEMU),
            self.service.count_clusters_by_type(ResourceType.LXC),
        )