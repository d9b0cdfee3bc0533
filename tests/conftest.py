from pathlib import Path

import cv2
import numpy as np
import pytest
from PIL import Image


def write_image(path: Path, size=(16, 24), channels=3) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    rng = np.random.default_rng(0)
    img = rng.integers(0, 256, size=(*size, channels), dtype=np.uint8)
    if path.suffix.lower() == ".gif":
        Image.fromarray(np.ascontiguousarray(img[:, :, :3])).save(path)
    else:
        assert cv2.imwrite(str(path), img)
    return path


def write_svg(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('<svg xmlns="http://www.w3.org/2000/svg" width="4" height="4"/>')
    return path


def write_corrupt(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"this is not an image")
    return path


class ScriptedPrompter:
    """Answers prompts from a list. Choices are picked by their value."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self, message):
        self.asked.append(message)
        return self.answers.pop(0)

    def choose(self, message, choices):
        answer = self._next(message)
        values = [v for _, v in choices]
        assert answer in values, f"{answer!r} not in {values!r}"
        return answer

    def choose_many(self, message, choices, empty_error):
        answer = self._next(message)
        values = [v for _, v in choices]
        assert answer and all(a in values for a in answer)
        return list(answer)

    def ask_text(self, message, default=""):
        answer = self._next(message)
        return default if answer is None else answer

    def confirm(self, message, default=True):
        return self._next(message)


@pytest.fixture
def public(tmp_path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    return root


@pytest.fixture
def site(public) -> Path:
    """public/logo.png, public/images/hero.jpg, public/icons/icon.svg"""
    write_image(public / "logo.png")
    write_image(public / "images" / "hero.jpg")
    write_svg(public / "icons" / "icon.svg")
    return public
