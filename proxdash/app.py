"""Command-line entry point starting the dashboard server."""

from __future__ import annotations

import argparse
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Sequence

from .config import DEFAULT_CONFIG_PATH, ClusterConfig, ConfigError, ConfigWatcher, load_config
from .models import Cluster, ClusterResource
from .server import Server
from .service import Service

log = logging.getLogger(__name__)

RESOURCES_PATH = "/cluster/resources"
STATUS_PATH = "/cluster/status"

Fetcher = Callable[[ClusterConfig, str], Iterable[Mapping[str, Any]]]


def _refresh(service: Service, fetch: Fetcher) -> None:
    """Fetch resources and status of every configured cluster into the service.

    Each data set is replaced only when every cluster answered; failures are logged.
    """
    clusters = service.config.clusters
    targets = (
        (RESOURCES_PATH, ClusterResource.from_dict, service.store_cluster_resources),
        (STATUS_PATH, Cluster.from_dict, service.store_clusters_info),
    )
    for path, build, store in targets:
        try:
            items = [build(entry) for cluster in clusters for entry in fetch(cluster, path)]
        except Exception:
            log.exception("failed to fetch %s", path)
            continue
        store(items)


def _reload(service: Service, config_path: Path, fetch: Fetcher | None) -> bool:
    """Reload the configuration into the service and refresh its data."""
    log.info("Configuration reload detected")
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        log.error("Failed to reload configuration: %s", exc)
        return False
    service.update_config(config)
    if fetch is not None:
        _refresh(service, fetch)
    log.info("Services restarted with the new configuration")
    return True


def _run(config_path: Path, fetch: Fetcher | None = None) -> int:
    log.info("Welcome to Proxmox Manager")
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        log.error("Failed to load configuration: %s", exc)
        return 1

    service = Service(config)
    server = Server(config, service)
    if fetch is not None:
        threading.Thread(
            target=_refresh, args=(service, fetch), name="cluster-loader", daemon=True
        ).start()

    watcher = ConfigWatcher(config_path, callback=lambda: _reload(service, config_path, fetch))
    log.info("Server started on %s", config.server.address)
    try:
        with watcher:
            server.start()
    except (OSError, ValueError, TimeoutError) as exc:
        log.error("Server error: %s", exc)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dashboard server; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="proxdash", description="Proxmox dashboard server.")
    parser.add_argument(
        "-c",
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="path of the YAML configuration file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    return _run(Path(args.config))


if __name__ == "__main__":
    raise SystemExit(main())