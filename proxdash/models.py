"""Data models for Proxmox cluster status and resources."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class Hastate(str, Enum):
    """Known states reported for resources."""

    AVAILABLE = "available"
    OK = "ok"
    ONLINE = "online"
    RUNNING = "running"
    STOPPED = "stopped"


class ResourceType(str, Enum):
    """Kinds of cluster resource."""

    LXC = "lxc"
    NODE = "node"
    QEMU = "qemu"
    SDN = "sdn"
    STORAGE = "storage"


def _as_enum(enum_cls: type[Enum], value: Any) -> Any:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class Cluster:
    """An entry of the cluster status endpoint (a cluster or one of its nodes)."""

    id: str = ""
    name: str = ""
    type: str = ""
    online: int = 0
    level: str = ""
    nodeid: int = 0
    ip: str = ""
    local: int = 0
    quorate: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Cluster":
        """Build an entry from decoded JSON, defaulting missing fields."""
        defaults = cls()
        values = {}
        for f in fields(cls):
            raw = data.get(f.name)
            values[f.name] = getattr(defaults, f.name) if raw is None else raw
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


_RESOURCE_KEYS = {"cgroup_mode": "cgroup-mode"}
_HASTATE_FIELDS = {"status", "hastate"}


@dataclass
class ClusterResource:
    """An entry of the cluster resources endpoint; every field is optional."""

    maxcpu: int | None = None
    cpu: float | None = None
    status: Hastate | str | None = None
    maxmem: int | None = None
    template: int | None = None
    node: str | None = None
    id: str | None = None
    diskwrite: int | None = None
    vmid: int | None = None
    mem: int | None = None
    disk: int | None = None
    type: ResourceType | str | None = None
    name: str | None = None
    tags: str | None = None
    netout: int | None = None
    diskread: int | None = None
    uptime: int | None = None
    maxdisk: int | None = None
    netin: int | None = None
    hastate: Hastate | str | None = None
    cgroup_mode: int | None = None
    level: str | None = None
    plugintype: str | None = None
    shared: int | None = None
    storage: str | None = None
    content: str | None = None
    sdn: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClusterResource":
        """Build a resource from decoded JSON, ignoring unknown keys."""
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = _RESOURCE_KEYS.get(f.name, f.name)
            if key not in data:
                continue
            raw = data[key]
            if f.name in _HASTATE_FIELDS:
                raw = _as_enum(Hastate, raw)
            elif f.name == "type":
                raw = _as_enum(ResourceType, raw)
            values[f.name] = raw
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, leaving out unset fields."""
        return {
            _RESOURCE_KEYS.get(f.name, f.name): _plain(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class Docker:
    """A Docker container seen on a host."""

    container_id: str = ""
    name: str = ""
    image: str = ""
    status: str = ""
    created: datetime | None = None
    port_mappings: list[str] = field(default_factory=list)
    last_restarted: datetime | None = None