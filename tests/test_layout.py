import re

import pytest

from proxdash.layout import base, get_online, modal, sidebar

ACTIVE = "block py-2 px-4 hover:bg-gray-700 bg-gray-700"
INACTIVE = "block py-2 px-4 hover:bg-gray-700"

PAGES = {
    "home": "/",
    "clusters": "/clusters",
    "nodes": "/nodes",
    "vms": "/vms",
    "lxcs": "/lxcs",
}


def _link_classes(html):
    return dict(re.findall(r'<a href="([^"]*)" class="([^"]*)"', html))


@pytest.mark.parametrize("value", [1, 5, 123456])
def test_get_online_positive(value):
    assert get_online(value) == "bg-green-100 text-green-600"


@pytest.mark.parametrize("value", [0, -1])
def test_get_online_not_positive(value):
    assert get_online(value) == "bg-gray-200 text-gray-600"


@pytest.mark.parametrize("page", sorted(PAGES))
def test_sidebar_highlights_only_current_page(page):
    links = _link_classes(sidebar(page))
    assert set(links) == set(PAGES.values())
    for name, href in PAGES.items():
        expected = ACTIVE if name == page else INACTIVE
        assert links[href] == expected


def test_sidebar_unknown_page_highlights_nothing():
    links = _link_classes(sidebar("dashboard-home"))
    assert set(links.values()) == {INACTIVE}


def test_sidebar_labels_in_order():
    html = sidebar("home")
    labels = ["Tableau de bord", "Clusters", "Nodes", "Machines Virtuelles", "Containers LXC"]
    positions = [html.index(f"</svg> {label}</div>") for label in labels]
    assert positions == sorted(positions)
    assert html.endswith('<div id="mobile-sidebar"></div></div>')


def test_base_structure_and_children():
    children = '<p class="x">hello</p>'
    html = base("Tableau de bord", "home", children)
    assert html.startswith('<!doctype html><html lang="fr">')
    assert "<title>Tableau de bord - Proxmox Manager</title>" in html
    assert sidebar("home") in html
    assert f'<main class="container mx-auto px-4 py-6">{children}</main>' in html
    assert html.endswith('<div id="modal-container"></div></body></html>')


def test_base_without_children_has_empty_main():
    html = base("T", "nodes")
    assert '<main class="container mx-auto px-4 py-6"></main>' in html
    assert sidebar("nodes") in html


def test_base_escapes_title():
    html = base("<script>", "home", "")
    assert "<title>&lt;script&gt; - Proxmox Manager</title>" in html
    assert "<script>" not in html.split("</title>")[0]


def test_modal_contains_title_and_content():
    html = modal("Titre", "Contenu")
    assert '<h2 class="text-xl font-bold">Titre</h2>' in html
    assert '<div class="modal-content">Contenu</div></div></div>' in html
    assert html.startswith('<div id="modal-backdrop"')


def test_modal_escapes_text():
    html = modal("a & b", "it's \"quoted\"")
    assert ">a &amp; b</h2>" in html
    assert "it&#39;s &#34;quoted&#34;" in html
    assert '"quoted"' not in html