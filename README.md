# proxdash

A lightweight web dashboard for Proxmox VE. It shows how many clusters are
configured, how many nodes, virtual machines and LXC containers they hold,
a status card for each cluster member, and a card for every VM and container
with its CPU, memory and disk figures.

The pages are plain HTML enhanced with htmx: the home page loads its panels
from small fragment endpoints.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

By default the configuration is read from `config.yaml` in the current
working directory (`proxdash.config.load_config`):

```yaml
server:
  address: "127.0.0.1:8080"
log:
  level: info
debug: false
clusters:
  - name: lab
    api_url: "https://pve.example.com:8006/api2/json"
    secret_id: "placeholder"
    secret_token: "token"
```

`server.address` is `host:port`; the host may be empty to listen on every
interface. A file that cannot be read or decoded raises
`proxdash.config.ConfigError`.

## Running

```
proxdash
proxdash --config /path/to/config.yaml
```

The server listens on `server.address` and stops cleanly on Ctrl-C or SIGTERM.
While it runs, the configuration file is polled once a second
(`proxdash.config.ConfigWatcher`); when it changes, it is loaded again, the
cached cluster data is cleared and the cluster count follows the new file.

Routes (GET and HEAD):

| Path                        | Content                                   |
|-----------------------------|-------------------------------------------|
| `/`                         | the dashboard page                        |
| `/clusters/dashboard-count` | counts of clusters, nodes, VMs and LXCs   |
| `/nodes`                    | status cards for cluster members          |
| `/nodes/lxc`                | cards for LXC containers                  |
| `/nodes/vm`                 | cards for virtual machines                |
| `/static/...`               | files from the static directory           |

A resource card needs its name, id, uptime, CPU, memory and disk fields; a
named resource missing any of them makes its fragment answer with a 500 error.

## What the package does not do

- It does not query the Proxmox API. The `proxdash` command starts the server
  with an empty in-memory store, so the dashboard shows no nodes, VMs or
  containers until data is put into the `Service` by your own code (see
  below). The credentials in the configuration are read but not used.
- It ships no static files. `/static/` is served from a `static` directory
  next to the package unless `Server` is given another one; the page links
  `/static/css/style.css`, which you must provide yourself.
- Nothing is stored on disk; all cluster data lives in memory.
- The sidebar links `/clusters`, `/vms` and `/lxcs` have no pages behind them.

## Using the library

Feed the dashboard from data you already have, for instance JSON entries
fetched from the `/cluster/resources` and `/cluster/status` endpoints:

```python
from proxdash.config import load_config
from proxdash.models import Cluster, ClusterResource, ResourceType
from proxdash.service import Service
from proxdash.server import Server

config = load_config("config.yaml")
service = Service(config)

service.store_cluster_resources([
    ClusterResource.from_dict({
        "id": "lxc/101", "type": "lxc", "name": "web", "node": "pve1",
        "uptime": 3600, "maxcpu": 2, "cpu": 0.05,
        "mem": 268435456, "maxmem": 1073741824,
        "disk": 1073741824, "maxdisk": 8589934592,
    }),
])
service.store_clusters_info([
    Cluster.from_dict({"id": "node/pve1", "name": "pve1", "type": "node",
                       "online": 1, "ip": "192.0.2.10", "local": 1}),
])

print(service.count_clusters_by_type(ResourceType.LXC))  # 1

server = Server(config, service, "static")
server.start()  # blocks until server.shutdown(), SIGINT or SIGTERM
```

`Server` is itself a WSGI application; `Server.wsgi_app` is the same
application wrapped with request logging, ready to mount under any WSGI
server. The helpers in `proxdash.middleware` (`with_logging`, `with_auth`,
`with_metrics`) wrap any WSGI application; `with_auth` and `with_metrics`
currently pass requests through unchanged.

The HTML fragments can be rendered directly from `proxdash.dashboard`
(`dashboard`, `dashboard_count`), `proxdash.components` (`cluster_status`,
`card_node`, `dashboard_nodes`, `dashboard_node`) and `proxdash.layout`
(`base`, `sidebar`, `modal`), or through `proxdash.handlers.Handlers`.

`proxdash.formatting.transform_bytes_for_human` turns byte counts into
readable sizes: `transform_bytes_for_human(1610612736, 2)` gives `1.50 GB`.