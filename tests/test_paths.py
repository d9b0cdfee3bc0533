import os

import pytest

from public_optimizer.models import NewFolder, Overwrite
from public_optimizer.paths import output_dir_for, resolve_output_path


def test_new_folder_nested_dir_becomes_suffixed_sibling(public):
    out = resolve_output_path(str(public), os.path.join("images", "hero.jpg"), NewFolder("_optimized"))

    assert out == os.path.join(str(public), "images_optimized", "hero.webp")
    assert (public / "images_optimized").is_dir()
    assert not (public / "images" / "_optimized").exists()


def test_new_folder_root_file_goes_to_suffix_dir(public):
    out = resolve_output_path(str(public), "logo.png", NewFolder("_optimized"))

    assert out == os.path.join(str(public), "_optimized", "logo.webp")
    assert (public / "_optimized").is_dir()


def test_new_folder_deep_dir_stays_at_same_level(public):
    rel = os.path.join("a", "b", "c.png")
    assert output_dir_for(rel, NewFolder("-small")) == os.path.join("a", "b-small")


def test_custom_suffix_is_used_verbatim(public):
    out = resolve_output_path(str(public), "logo.png", NewFolder(".webp-out"))
    assert out == os.path.join(str(public), ".webp-out", "logo.webp")


@pytest.mark.parametrize("rel", [
    "logo.png",
    os.path.join("images", "hero.jpg"),
    os.path.join("a", "b", "c", "d.gif"),
])
def test_overwrite_keeps_input_directory(public, rel):
    out = resolve_output_path(str(public), rel, Overwrite())

    assert os.path.dirname(out) == os.path.dirname(os.path.join(str(public), rel))
    assert os.path.basename(out) == os.path.splitext(os.path.basename(rel))[0] + ".webp"
    assert os.path.isdir(os.path.dirname(out))


def test_output_path_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "public").mkdir()
    out = resolve_output_path("public", "logo.png", NewFolder())
    assert os.path.isabs(out)


def test_directory_creation_is_idempotent(public):
    first = resolve_output_path(str(public), "images/a.png", NewFolder())
    second = resolve_output_path(str(public), "images/b.png", NewFolder())
    assert os.path.dirname(first) == os.path.dirname(second)


def test_blocked_output_directory_raises_oserror(public):
    (public / "images_optimized").write_text("a file in the way")
    with pytest.raises(OSError):
        resolve_output_path(str(public), "images/hero.jpg", NewFolder())


def test_only_extension_is_stripped(public):
    out = resolve_output_path(str(public), "my.photo.v2.jpeg", Overwrite())
    assert os.path.basename(out) == "my.photo.v2.webp"
