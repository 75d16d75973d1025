from proxdash.dashboard import dashboard, dashboard_count


def test_dashboard_is_full_page_with_title():
    page = dashboard("Tableau de bord", "dashboard-home")
    assert page.startswith("<!doctype html>")
    assert "<title>Tableau de bord - Proxmox Manager</title>" in page
    assert page.endswith("</body></html>")


def test_dashboard_loads_sections_in_order():
    page = dashboard("Home", "home")
    positions = [
        page.index('hx-get="/clusters/dashboard-count"'),
        page.index('hx-get="/nodes"'),
        page.index('hx-get="/nodes/lxc"'),
        page.index('hx-get="/nodes/vm"'),
    ]
    assert positions == sorted(positions)


def test_dashboard_escapes_title():
    page = dashboard("<b>", "home")
    assert "<title>&lt;b&gt; - Proxmox Manager</title>" in page


def test_dashboard_count_shows_placeholder_for_zero():
    html = dashboard_count(0, 0, 0, 0)
    assert html.count("<p>...</p>") == 4
    assert html.startswith('<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-4 gap-4 mb-6">')


def test_dashboard_count_shows_values_in_card_order():
    html = dashboard_count(2, 5, 7, 11)
    assert "<p>...</p>" not in html
    expected_order = ["Clusters</h2><p>2</p>", "Nodes</h2><p>5</p>", "VMs</h2><p>7</p>",
                      "Containers LXC</h2><p>11</p>"]
    positions = [html.index(part) for part in expected_order]
    assert positions == sorted(positions)


def test_dashboard_count_mixes_values_and_placeholders():
    html = dashboard_count(1, 0, 3, -1)
    assert "Clusters</h2><p>1</p>" in html
    assert "Nodes</h2><p>...</p>" in html
    assert "VMs</h2><p>3</p>" in html
    assert "Containers LXC</h2><p>...</p>" in html