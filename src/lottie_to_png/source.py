"""Loading of Lottie animation documents from disk."""

import gzip
import json
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from .render.errors import AnimationLoadError

SUPPORTED_SOURCE_EXTENSIONS = (".json", ".lottie", ".tgs")
_GZIP_MAGIC = b"\x1f\x8b"


def load_animation_source(path: str | Path) -> str:
    """
    Read an animation file into Lottie JSON text.

    Plain ``.json`` documents are returned as-is, ``.tgs`` stickers (and any
    gzip-compressed file) are decompressed and ``.lottie`` archives yield
    their first animation.

    Raises:
        AnimationLoadError: If the file cannot be read or unpacked
    """
    source_path = Path(path)
    try:
        if source_path.suffix.lower() == ".lottie" or zipfile.is_zipfile(source_path):
            return _read_dotlottie(source_path)
        raw = source_path.read_bytes()
    except OSError as exc:
        raise AnimationLoadError(f"Cannot read '{source_path}': {exc}") from exc

    if raw.startswith(_GZIP_MAGIC):
        try:
            raw = gzip.decompress(raw)
        except (OSError, EOFError, zlib.error) as exc:
            raise AnimationLoadError(f"Cannot decompress '{source_path}': {exc}") from exc
    return _decode_text(raw, source_path)


def _read_dotlottie(path: Path) -> str:
    try:
        with zipfile.ZipFile(path) as archive:
            member = _dotlottie_animation_member(archive)
            return _decode_text(archive.read(member), path)
    except (zipfile.BadZipFile, KeyError) as exc:
        raise AnimationLoadError(f"Invalid .lottie archive '{path}': {exc}") from exc


def _dotlottie_animation_member(archive: zipfile.ZipFile) -> str:
    """Name of the first animation in a dotLottie archive."""
    names = archive.namelist()
    if "manifest.json" in names:
        try:
            manifest = json.loads(archive.read("manifest.json"))
        except json.JSONDecodeError as exc:
            raise AnimationLoadError(f"Invalid .lottie manifest: {exc}") from exc
        for animation in manifest.get("animations", []):
            member = f"animations/{animation.get('id')}.json"
            if member in names:
                return member

    candidates = sorted(
        name for name in names
        if PurePosixPath(name).parent.name == "animations" and name.endswith(".json")
    )
    if not candidates:
        raise AnimationLoadError("No animation found in .lottie archive")
    return candidates[0]


def _decode_text(raw: bytes, path: Path) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise AnimationLoadError(f"'{path}' is not UTF-8 text: {exc}") from exc
