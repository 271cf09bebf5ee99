import os

import pytest

from asset_index.logger import FilesystemError
from asset_index import scanner
from asset_index.scanner import ENTRY_ASSET, ENTRY_DIR, ENTRY_OTHER, classify, find_assets, is_hidden, iter_assets

from conftest import touch


def _rel(assets, root):
    return [a.path.relative_to(root).as_posix() for a in assets]


@pytest.mark.unit
def test_depth_first_sorted_order(asset_root, make_config):
    for rel in ("b.png", "a/z.png", "c.jpg", "deep/x/y.gif", "skip.txt", "a/m/n.svg"):
        touch(asset_root / rel)

    assets = find_assets(make_config())

    assert _rel(assets, asset_root) == [
        "a/m/n.svg",
        "a/z.png",
        "b.png",
        "c.jpg",
        "deep/x/y.gif",
    ]
    assert [a.extension for a in assets] == [".svg", ".png", ".png", ".jpg", ".gif"]


@pytest.mark.unit
def test_extension_filter_is_case_sensitive_at_any_depth(asset_root, make_config):
    touch(asset_root / "upper.PNG")
    touch(asset_root / "one" / "two" / "three" / "notes.md")
    touch(asset_root / "one" / "two" / "three" / "ok.png")

    assert _rel(find_assets(make_config(ext="png")), asset_root) == ["one/two/three/ok.png"]


@pytest.mark.unit
def test_directories_recursed_regardless_of_name(asset_root, make_config):
    touch(asset_root / "folder.png" / "inner.png")

    assert _rel(find_assets(make_config()), asset_root) == ["folder.png/inner.png"]


@pytest.mark.unit
def test_hidden_entries_skipped_by_default(asset_root, make_config):
    touch(asset_root / ".cache" / "x.png")
    touch(asset_root / ".hidden.png")
    touch(asset_root / "visible.png")

    assert _rel(find_assets(make_config()), asset_root) == ["visible.png"]


@pytest.mark.unit
def test_hidden_entries_included_when_enabled(asset_root, make_config):
    touch(asset_root / ".cache" / "x.png")
    touch(asset_root / "visible.png")

    assets = find_assets(make_config(include_hidden=True))

    assert _rel(assets, asset_root) == [".cache/x.png", "visible.png"]


@pytest.mark.unit
def test_missing_root_raises(tmp_path, make_config):
    cfg = make_config()
    os.rmdir(cfg.root)

    with pytest.raises(FilesystemError) as info:
        find_assets(cfg)
    assert info.value.path == str(cfg.root)


@pytest.mark.unit
def test_root_that_is_a_file_raises(tmp_path):
    from asset_index.config import GeneratorConfig

    f = touch(tmp_path / "file.png")
    cfg = GeneratorConfig(root=f, output=tmp_path / "out.ts")

    with pytest.raises(FilesystemError):
        list(iter_assets(cfg))


@pytest.mark.unit
def test_broken_symlink_aborts_scan(asset_root, make_config):
    touch(asset_root / "good.png")
    os.symlink(asset_root / "missing.png", asset_root / "broken.png")

    with pytest.raises(FilesystemError) as info:
        find_assets(make_config())
    assert info.value.path.endswith("broken.png")


@pytest.mark.unit
def test_symlinked_file_is_followed(asset_root, tmp_path, make_config):
    target = touch(tmp_path / "outside" / "real.png")
    os.symlink(target, asset_root / "linked.png")

    assert _rel(find_assets(make_config()), asset_root) == ["linked.png"]


@pytest.mark.unit
def test_classify(asset_root, make_config):
    cfg = make_config()
    png = touch(asset_root / "a.png")
    txt = touch(asset_root / "a.txt")

    assert classify(png, cfg) == ENTRY_ASSET
    assert classify(txt, cfg) == ENTRY_OTHER
    assert classify(asset_root, cfg) == ENTRY_DIR
    with pytest.raises(FilesystemError):
        classify(asset_root / "nope.png", cfg)


@pytest.mark.unit
def test_walk_classifies_every_visible_entry(monkeypatch, asset_root, make_config):
    touch(asset_root / "a.png")
    touch(asset_root / "sub" / "b.txt")
    touch(asset_root / ".skip" / "c.png")
    seen = []
    real = scanner.classify

    def recording(path, config):
        kind = real(path, config)
        seen.append((os.path.relpath(path, asset_root), kind))
        return kind

    monkeypatch.setattr(scanner, "classify", recording)

    assert _rel(find_assets(make_config()), asset_root) == ["a.png"]
    assert seen == [
        ("a.png", ENTRY_ASSET),
        ("sub", ENTRY_DIR),
        (os.path.join("sub", "b.txt"), ENTRY_OTHER),
    ]


@pytest.mark.unit
def test_is_hidden():
    assert is_hidden(".git")
    assert not is_hidden("img.png")
