"""Application configuration loaded from a YAML file."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")


class ConfigError(Exception):
    """Raised when the configuration cannot be read or decoded."""


@dataclass
class ServerConfig:
    address: str = ""


@dataclass
class LogConfig:
    level: str = ""


@dataclass
class ClusterConfig:
    name: str = ""
    api_url: str = ""
    secret_id: str = ""
    secret_token: str = ""


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    log: LogConfig = field(default_factory=LogConfig)
    debug: bool = False
    clusters: list[ClusterConfig] = field(default_factory=list)


def _section(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"'{name}' must be a mapping")
    return {str(key).lower(): item for key, item in value.items()}


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list)):
        raise ConfigError(f"'{name}' must be a scalar")
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _as_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "t", "true", "yes", "on"}:
            return True
        if lowered in {"", "0", "f", "false", "no", "off"}:
            return False
    raise ConfigError(f"'{name}' must be a boolean")


def _cluster(value: Any, position: int) -> ClusterConfig:
    data = _section(value, f"clusters[{position}]")
    return ClusterConfig(
        **{
            key: _as_str(data.get(key), f"clusters[{position}].{key}")
            for key in ("name", "api_url", "secret_id", "secret_token")
        }
    )


def load_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Read and decode the YAML configuration file (``config.yaml`` by default)."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {config_path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc

    data = _section(raw, "configuration")
    clusters_raw = data.get("clusters")
    if clusters_raw is None:
        clusters_raw = []
    if not isinstance(clusters_raw, list):
        raise ConfigError("'clusters' must be a list")

    server = _section(data.get("server"), "server")
    log_section = _section(data.get("log"), "log")
    return Config(
        server=ServerConfig(address=_as_str(server.get("address"), "server.address")),
        log=LogConfig(level=_as_str(log_section.get("level"), "log.level")),
        debug=_as_bool(data.get("debug"), "debug"),
        clusters=[_cluster(item, i) for i, item in enumerate(clusters_raw)],
    )


class ConfigWatcher:
    """Polls a configuration file and calls a callback whenever it changes."""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        callback: Callable[[], Any] | None = None,
        interval: float = 1.0,
    ) -> None:
        if callback is None:
            raise ValueError("a callback is required")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
        self.callback = callback
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._last: tuple[int, int] | None = None

    def _signature(self) -> tuple[int, int] | None:
        try:
            stat = self.path.stat()
        except OSError:
            return None
        return stat.st_mtime_ns, stat.st_size

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            current = self._signature()
            if current == self._last:
                continue
            self._last = current
            if current is None:
                continue
            try:
                self.callback()
            except Exception:
                log.exception("configuration change callback failed")

    def start(self) -> None:
        """Start watching in a background thread; a second call does nothing."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._last = self._signature()
        self._thread = threading.Thread(target=self._run, name="config-watcher", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop watching and wait for the background thread to end."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> "ConfigWatcher":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()