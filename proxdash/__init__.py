"""Web dashboard for Proxmox clusters, nodes, virtual machines and containers."""

__version__ = "0.1.0"