from pathlib import Path

import pytest

from asset_index.collisions import detect_collisions
from asset_index.logger import DuplicateExportError
from asset_index.naming import derive_identifiers
from asset_index.scanner import AssetFile


def _entries(*rels):
    out = []
    for rel in rels:
        path = Path("/root") / rel
        out.append((AssetFile(path, path.suffix), derive_identifiers("/root", path)))
    return out


@pytest.mark.unit
def test_unique_names_pass_through_in_order():
    entries = _entries("a.png", "b/c.svg", "d.gif")

    check = detect_collisions(entries)

    assert check.ok
    assert list(check.unwrap()) == entries


@pytest.mark.unit
def test_first_duplicate_reported_with_second_path():
    entries = _entries("icons/Home.svg", "icons/home.svg", "a-b.png", "a_b.png")

    check = detect_collisions(entries)

    assert not check.ok
    assert check.entries == ()
    assert check.duplicate.name == "I_ICONS_HOME"
    assert check.duplicate.path == "/root/icons/home.svg"
    with pytest.raises(DuplicateExportError, match="I_ICONS_HOME"):
        check.unwrap()


@pytest.mark.unit
def test_detection_is_reproducible():
    entries = _entries("x/y.png", "x_y.png", "x-y.png")

    first = detect_collisions(entries).duplicate
    second = detect_collisions(entries).duplicate

    assert str(first) == str(second)
    assert first.path == "/root/x_y.png"


@pytest.mark.unit
def test_empty_input_is_ok():
    check = detect_collisions([])
    assert check.ok
    assert check.unwrap() == ()
