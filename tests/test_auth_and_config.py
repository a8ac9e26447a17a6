import pytest

from placement_admin.auth import Credentials, check_credentials
from placement_admin.config import (
    LOGIN_ROUTE,
    NAV_ITEMS,
    NOT_FOUND_ROUTE,
    Settings,
    load_settings,
    normalize_path,
    resolve_route,
)

FIXED = Credentials("admin", "admin123")


def test_fixed_pair_is_accepted():
    assert check_credentials("admin", "admin123", FIXED) is True


@pytest.mark.parametrize(
    "username,password",
    [
        ("admin", "wrong"),
        ("Admin", "admin123"),
        ("admin ", "admin123"),
        ("", ""),
        ("root", "admin123"),
        ("admin", "ADMIN123"),
    ],
)
def test_other_pairs_are_rejected(username, password):
    assert check_credentials(username, password, FIXED) is False


@pytest.mark.parametrize(
    "path,expected",
    [
        (None, "/"),
        ("", "/"),
        ("/", "/"),
        ("/dashboard/", "/dashboard"),
        ("dashboard/staff", "/dashboard/staff"),
    ],
)
def test_normalize_path(path, expected):
    assert normalize_path(path) == expected


def test_every_nav_item_resolves_to_itself():
    for item in NAV_ITEMS:
        assert resolve_route(item.path) is item


@pytest.mark.parametrize("path", ["/", "", None])
def test_root_resolves_to_login(path):
    assert resolve_route(path) is LOGIN_ROUTE


@pytest.mark.parametrize("path", ["/dashboard/unknown", "/settings", "/dashboardx"])
def test_unknown_paths_resolve_to_not_found(path):
    assert resolve_route(path) is NOT_FOUND_ROUTE


def test_nav_order_matches_sidebar():
    assert [item.label for item in NAV_ITEMS] == [
        "Dashboard",
        "Dynamic Data",
        "Applications",
        "Internships",
        "Staff Management",
    ]


def test_settings_defaults(monkeypatch):
    for name in ("ADMIN_USERNAME", "ADMIN_PASSWORD", "NOTIFICATION_TTL_SECONDS", "LOG_LEVEL", "PAGE_TITLE"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.credentials == FIXED
    assert settings.notification_ttl_seconds == Settings().notification_ttl_seconds


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ADMIN_USERNAME", "placement")
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")
    monkeypatch.setenv("NOTIFICATION_TTL_SECONDS", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.credentials == Credentials("placement", "s3cret")
    assert settings.notification_ttl_seconds == 2.5
    assert settings.log_level == "DEBUG"


def test_bad_numeric_setting_falls_back(monkeypatch):
    monkeypatch.setenv("NOTIFICATION_TTL_SECONDS", "soon")
    assert load_settings().notification_ttl_seconds == 5.0
