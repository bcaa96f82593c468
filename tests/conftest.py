"""Pytest fixtures and test utilities."""

from pathlib import Path

import pytest

from dupectl.utils.config import reset_config


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory so no real config file is read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    reset_config()
    yield home
    reset_config()


@pytest.fixture
def scan_dir(tmp_path):
    """Create an empty directory to scan."""
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def abc_dir(scan_dir):
    """A and B share content, C is unique."""
    (scan_dir / "a.txt").write_bytes(b"x")
    (scan_dir / "b.txt").write_bytes(b"x")
    (scan_dir / "c.txt").write_bytes(b"y")
    return scan_dir


@pytest.fixture
def nested_dupes(scan_dir):
    """Two duplicate groups spread over subdirectories, plus a unique file."""
    photos = scan_dir / "photos"
    backup = scan_dir / "photos_backup"
    photos.mkdir()
    backup.mkdir()

    (photos / "img1.jpg").write_bytes(b"JPEG" * 512)
    (backup / "img1_copy.jpg").write_bytes(b"JPEG" * 512)
    (backup / "img1_copy2.jpg").write_bytes(b"JPEG" * 512)

    (photos / "notes.txt").write_bytes(b"hello")
    (scan_dir / "notes_old.txt").write_bytes(b"hello")

    (scan_dir / "unique.bin").write_bytes(b"\x00\x01\x02")
    return scan_dir


@pytest.fixture
def write_config(isolated_home):
    """Return a helper that writes config.toml under the temporary home."""

    def _write(text: str) -> Path:
        config_dir = isolated_home / ".config" / "dupectl"
        config_dir.mkdir(parents=True, exist_ok=True)
        config_file = config_dir / "config.toml"
        config_file.write_text(text)
        return config_file

    return _write
