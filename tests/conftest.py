from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_MANIFEST = """\
<?xml version="1.0" encoding="UTF-8"?>
<manifest>
  <remote name="origin" fetch="https://android.googlesource.com" review="https://android-review.googlesource.com" />
  <remote name="mirror" fetch="https://mirror.example.com" revision="stable" />
  <default sync-j="4" revision="main" />
  <project path="build/make" name="platform/build" remote="origin" groups="pdk" />
  <project path="external/zlib" name="platform/external/zlib" remote="mirror" revision="v1.3" dest-branch="release" />
</manifest>
"""


@pytest.hookimpl(trylast=True)
def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    del config
    for item in items:
        path = Path(str(getattr(item, "path", item.fspath)))
        if "integration" in path.parts:
            item.add_marker(pytest.mark.integration)
            item.add_marker(pytest.mark.slow)


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    path = tmp_path / "default.xml"
    path.write_text(SAMPLE_MANIFEST, encoding="utf-8")
    return path


@pytest.fixture
def sample_manifest() -> bytes:
    return SAMPLE_MANIFEST.encode("utf-8")
