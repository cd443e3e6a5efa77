from __future__ import annotations
import json
from pathlib import Path
import pytest


@pytest.fixture
def pkg_dir(tmp_path: Path) -> Path:
    d = tmp_path / "pkg"
    d.mkdir(parents=True, exist_ok=True)
    return d


@pytest.fixture
def write_pkg(pkg_dir: Path):
    def _write(data) -> Path:
        p = pkg_dir / "package.json"
        p.write_text(json.dumps(data), encoding="utf-8")
        return p
    return _write


@pytest.fixture
def read_pkg():
    def _read(p: Path) -> dict:
        return json.loads(p.read_text(encoding="utf-8"))
    return _read
