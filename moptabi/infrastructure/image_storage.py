"""Local file storage for trip images."""

from __future__ import annotations

from pathlib import Path

from moptabi.config import get_settings
from moptabi.utils import to_epoch_millis, utc_now


def _image_dir() -> Path:
    return Path(get_settings().image_dir)


def save_image(data: bytes, original_name: str) -> str:
    """Write ``data`` under a millisecond-timestamped name and return that name."""

    directory = _image_dir()
    directory.mkdir(parents=True, exist_ok=True)
    file_name = f"{to_epoch_millis(utc_now())}_{original_name}"
    (directory / file_name).write_bytes(data)
    return file_name


def image_path(file_name: str) -> Path | None:
    """Return the stored file called ``file_name``, or ``None`` when there is none.

    Names that would resolve outside the image directory are treated as missing.
    """

    directory = _image_dir().resolve()
    path = (directory / file_name).resolve()
    if path.parent != directory or not path.is_file():
        return None
    return path


__all__ = ["image_path", "save_image"]
