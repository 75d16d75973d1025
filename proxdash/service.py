"""In-memory store of cluster data shared between the poller and the handlers."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from .config import Config
from .models import Cluster, ClusterResource, ResourceType

log = logging.getLogger(__name__)


class Service:
    """Holds the latest cluster resources and status for the configured clusters."""

    def __init__(self, config: Config) -> None:
        self._lock = threading.RLock()
        self._config = config
        self._clusters: list[ClusterResource] = []
        self._clusters_info: list[Cluster] = []

    @property
    def config(self) -> Config:
        with self._lock:
            return self._config

    def update_config(self, config: Config) -> None:
        """Switch to a new configuration and drop cached data."""
        with self._lock:
            self._config = config
            self._clusters = []
            self._clusters_info = []
        log.info("Service configuration updated")

    def store_cluster_resources(self, resources: Iterable[ClusterResource]) -> None:
        """Replace the cached cluster resources."""
        new_resources = list(resources)
        with self._lock:
            self._clusters = new_resources

    def store_clusters_info(self, clusters: Iterable[Cluster]) -> None:
        """Replace the cached cluster status entries."""
        new_info = list(clusters)
        with self._lock:
            self._clusters_info = new_info

    def get_clusters_data(self) -> list[ClusterResource]:
        """Return a copy of the cached resources."""
        with self._lock:
            return list(self._clusters)

    def get_clusters_info(self) -> list[Cluster]:
        """Return a copy of the cached status entries."""
        with self._lock:
            return list(self._clusters_info)

    def get_clusters_last_uptime(self) -> list[ClusterResource]:
        """Return the node resources ordered by ascending uptime."""
        with self._lock:
            nodes = [r for r in self._clusters if r.type == ResourceType.NODE]
        return sorted(nodes, key=lambda r: (r.uptime is None, r.uptime or 0))

    def count_clusters_by_type(self, resource_type: ResourceType | str) -> int:
        """Count cached resources of the given type."""
        with self._lock:
            return sum(1 for r in self._clusters if r.type is not None and r.type == resource_type)

    def get_cluster_count(self) -> int:
        """Return the number of configured clusters."""
        with self._lock:
            return len(self._config.clusters)

    def dashboard_get_node_lxc_or_vm(
        self, resource_type: ResourceType | str
    ) -> list[ClusterResource]:
        """Return resources of one type, those with zero uptime first."""
        with self._lock:
            selected = [
                r for r in self._clusters if r.type is not None and r.type == resource_type
            ]
        return sorted(selected, key=lambda r: r.uptime != 0)