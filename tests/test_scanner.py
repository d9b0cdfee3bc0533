import os

import pytest

from public_optimizer.models import RootNotFoundError
from public_optimizer.scanner import scan_images


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


def test_returns_only_recognized_extensions_at_any_depth(public):
    for name in ["a.jpg", "b.jpeg", "c.png", "d.gif", "e.svg",
                 "deep/er/still/f.png", "x/notes.txt", "x/data.json", "g.webp", "h.bmp"]:
        touch(public / name)

    found = scan_images(str(public))

    assert sorted(found) == sorted([
        "a.jpg", "b.jpeg", "c.png", "d.gif", "e.svg",
        os.path.join("deep", "er", "still", "f.png"),
    ])


def test_extension_match_is_case_insensitive(public):
    touch(public / "UPPER.PNG")
    touch(public / "Mixed.JpEg")

    assert sorted(scan_images(str(public))) == ["Mixed.JpEg", "UPPER.PNG"]


def test_order_is_stable_and_unique(public):
    for name in ["b.png", "a.png", "sub/z.png", "sub/a.png", "c.png"]:
        touch(public / name)

    first = scan_images(str(public))

    assert first == scan_images(str(public))
    assert len(first) == len(set(first))
    assert first[:3] == ["a.png", "b.png", "c.png"]


def test_empty_root_is_not_an_error(public):
    (public / "empty-subdir").mkdir()
    assert scan_images(str(public)) == []


def test_missing_root_raises(tmp_path):
    with pytest.raises(RootNotFoundError) as exc:
        scan_images(str(tmp_path / "public"))
    assert exc.value.root == str(tmp_path / "public")


def test_file_as_root_raises(tmp_path):
    f = tmp_path / "public"
    f.write_text("not a dir")
    with pytest.raises(RootNotFoundError):
        scan_images(str(f))


def test_hidden_files_and_directories_are_skipped(public):
    touch(public / ".hidden.png")
    touch(public / ".well-known" / "logo.png")
    touch(public / "images" / ".cache" / "thumb.jpg")
    touch(public / "images" / "hero.jpg")

    assert scan_images(str(public)) == [os.path.join("images", "hero.jpg")]
