from core.services.dashboard import build_dashboard


def test_build_dashboard(auth_user):
    dashboard = build_dashboard(auth_user)

    assert dashboard.email == "driver@example.com"
    assert dashboard.points_display == "1,250"
    assert [s.value for s in dashboard.stats] == ["342", "127h", "89", "4.8"]
    assert len(dashboard.recent_trips) == 3
    assert [a.color for a in dashboard.alerts] == ["red", "yellow", "blue"]


def test_only_new_route_action_links(auth_user):
    actions = {action.label: action.href for action in build_dashboard(auth_user).quick_actions}
    assert actions == {"New route": "/trips/new", "Report": None, "Favorites": None, "Achievements": None}


def test_dashboard_lists_are_independent_copies(auth_user):
    first = build_dashboard(auth_user)
    first.stats[0].value = "0"
    assert build_dashboard(auth_user).stats[0].value == "342"
