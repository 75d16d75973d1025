from proxdash.config import ClusterConfig, Config
from proxdash.models import Cluster, ClusterResource, ResourceType
from proxdash.service import Service


def make_config(count=2):
    return Config(clusters=[ClusterConfig(name=f"c{i}") for i in range(count)])


def sample_resources():
    return [
        ClusterResource(type=ResourceType.NODE, name="n1", uptime=500),
        ClusterResource(type=ResourceType.LXC, name="ct-up", uptime=100),
        ClusterResource(type=ResourceType.LXC, name="ct-down", uptime=0),
        ClusterResource(type=ResourceType.QEMU, name="vm1", uptime=0),
        ClusterResource(type=ResourceType.NODE, name="n2", uptime=50),
        ClusterResource(name="untyped"),
    ]


def test_new_service_is_empty():
    service = Service(make_config())
    assert service.get_clusters_data() == []
    assert service.get_clusters_info() == []
    assert service.get_cluster_count() == 2


def test_count_by_type():
    service = Service(make_config())
    service.store_cluster_resources(sample_resources())
    assert service.count_clusters_by_type(ResourceType.NODE) == 2
    assert service.count_clusters_by_type(ResourceType.LXC) == 2
    assert service.count_clusters_by_type(ResourceType.QEMU) == 1
    assert service.count_clusters_by_type(ResourceType.STORAGE) == 0


def test_dashboard_list_puts_stopped_first():
    service = Service(make_config())
    service.store_cluster_resources(sample_resources())
    names = [r.name for r in service.dashboard_get_node_lxc_or_vm(ResourceType.LXC)]
    assert names == ["ct-down", "ct-up"]


def test_dashboard_list_filters_by_type():
    service = Service(make_config())
    service.store_cluster_resources(sample_resources())
    result = service.dashboard_get_node_lxc_or_vm(ResourceType.QEMU)
    assert [r.name for r in result] == ["vm1"]


def test_last_uptime_orders_nodes_ascending():
    service = Service(make_config())
    service.store_cluster_resources(sample_resources())
    result = service.get_clusters_last_uptime()
    assert [r.name for r in result] == ["n2", "n1"]
    assert all(r.type == ResourceType.NODE for r in result)


def test_returned_lists_are_copies():
    service = Service(make_config())
    service.store_cluster_resources(sample_resources())
    service.store_clusters_info([Cluster(name="pve")])
    service.get_clusters_data().clear()
    service.get_clusters_info().clear()
    assert len(service.get_clusters_data()) == len(sample_resources())
    assert service.get_clusters_info() == [Cluster(name="pve")]


def test_update_config_clears_caches():
    service = Service(make_config(2))
    service.store_cluster_resources(sample_resources())
    service.store_clusters_info([Cluster(name="pve")])
    service.update_config(make_config(3))
    assert service.get_clusters_data() == []
    assert service.get_clusters_info() == []
    assert service.get_cluster_count() == 3