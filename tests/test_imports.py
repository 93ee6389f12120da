"""Smoke tests for package import and version."""

import confnode


def test_import_package() -> None:
    assert isinstance(confnode, object)


def test_version() -> None:
    assert confnode.__version__ == "0.1.0"


def test_public_api() -> None:
    for name in ("load", "load_file", "Configuration", "setting", "KeyNotFoundError"):
        assert hasattr(confnode, name)
