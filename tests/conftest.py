import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path so `import asset_index...` works locally
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from asset_index.config import GeneratorConfig, parse_extensions  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    """Keep host environment flags from leaking into configs built in tests."""
    for name in ("ASSET_INDEX_USE_POLLING", "ASSET_INDEX_INCLUDE_HIDDEN", "ASSET_INDEX_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def asset_root(tmp_path):
    root = tmp_path / "assets"
    root.mkdir()
    return root


@pytest.fixture
def make_config(asset_root, tmp_path):
    def _make(output=None, ext="jpg,png,svg,gif", **kwargs):
        out = Path(output) if output else tmp_path / "generated.ts"
        return GeneratorConfig(
            root=asset_root,
            output=out,
            extensions=parse_extensions(ext),
            **kwargs,
        )

    return _make


def touch(path: Path, data: bytes = b"x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
