from importlib import metadata
from unittest import mock

import pytest

from iockit import version


@pytest.mark.parametrize(
    "value, want",
    [
        ("0.1.0", "v0.1.0"),
        ("v0.1.0", "v0.1.0"),
        ("dev", "dev"),
        ("", "(unknown)"),
        ("unknown", "(unknown)"),
    ],
)
def test_now(monkeypatch, value, want):
    monkeypatch.setattr(version, "VERSION", value)
    assert version.now() == want


def test_summary(monkeypatch):
    monkeypatch.setattr(version, "VERSION", "v0.2.0")
    monkeypatch.setattr(version, "COMMIT", "abc1234")
    monkeypatch.setattr(version, "BUILD_TIME", "2026-03-20T00:00:00Z")
    assert version.summary() == "v0.2.0 (commit abc1234, built 2026-03-20T00:00:00Z)"

    monkeypatch.setattr(version, "COMMIT", "")
    monkeypatch.setattr(version, "BUILD_TIME", "")
    assert version.summary() == "v0.2.0"


def test_print_version(monkeypatch, capsys):
    monkeypatch.setattr(version, "VERSION", "0.1.0")
    monkeypatch.setattr(version, "COMMIT", "unknown")
    monkeypatch.setattr(version, "BUILD_TIME", "unknown")
    version.print_version()
    assert capsys.readouterr().out == "Version: v0.1.0\n"


def test_main_version_when_not_installed():
    with mock.patch(
        "importlib.metadata.version",
        side_effect=metadata.PackageNotFoundError("iockit"),
    ):
        assert version.main_version() == "(unknown)"


def test_main_version_when_installed():
    with mock.patch("importlib.metadata.version", return_value="0.1.0"):
        assert version.main_version() == "0.1.0"


def test_main_version_empty_is_unknown():
    with mock.patch("importlib.metadata.version", return_value=""):
        assert version.main_version() == "(unknown)"