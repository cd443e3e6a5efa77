"""Manifest culling.

Trims a ``package.json`` mapping down to the fields npm and package
consumers care about. Top-level keys outside the allow-list are deleted;
the ``scripts`` object keeps only lifecycle scripts unless ``scripts`` was
explicitly preserved, in which case it is left exactly as read.

The file is rewritten in place with 2-space indentation and a trailing
newline. The write goes through a sibling temp file so a failed write
never truncates the original.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List

from .fields import LIFECYCLE_SCRIPTS, allowed_fields
from .types import CullResult, Manifest

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


class ManifestError(ValueError):
    """Raised when the manifest parses as JSON but is not a JSON object."""


def find_manifest(cwd: str | os.PathLike | None = None) -> Path:
    """Return the ``package.json`` path inside ``cwd`` (default: process cwd)."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / MANIFEST_NAME


def load_manifest(path: str | os.PathLike) -> Manifest:
    """Read and parse a manifest file.

    :param path: Path to ``package.json``.
    :return: Parsed manifest mapping.
    :raises FileNotFoundError: If the file does not exist.
    :raises json.JSONDecodeError: If the content is not valid JSON.
    :raises ManifestError: If the top-level value is not an object.
    """
    text = Path(path).read_text(encoding="utf-8")

    def _reject_constant(name: str):
        # NaN and Infinity are not JSON
        raise json.JSONDecodeError(f"Invalid constant {name!r}", text, text.find(name))

    data = json.loads(text, parse_constant=_reject_constant)
    if not isinstance(data, dict):
        raise ManifestError(f"{path}: expected a JSON object, got {type(data).__name__}")
    logger.debug("loaded %s (%d top-level fields)", path, len(data))
    return data


def write_manifest(path: str | os.PathLike, manifest: Manifest) -> None:
    """Serialize ``manifest`` and replace the file at ``path``.

    :param path: Destination file, overwritten on success.
    :param manifest: Mapping to serialize.
    """
    # write through symlinks to the real file
    target = Path(path).resolve()
    payload = json.dumps(manifest, indent=2, ensure_ascii=False, allow_nan=False) + "\n"
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(payload)
        if target.exists():
            # mkstemp creates 0600; keep the original permissions
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("wrote %s (%d bytes)", target, len(payload.encode("utf-8")))


def _prune_scripts(manifest: Manifest, result: CullResult) -> None:
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return
    for script in list(scripts):
        if script not in LIFECYCLE_SCRIPTS:
            del scripts[script]
            result.scripts_pruned.append(script)
    if not scripts:
        # Only a fully emptied scripts object is reported.
        del manifest["scripts"]
        result.removed.append("scripts")


def cull_fields(manifest: Manifest, preserve: Iterable[str] | None = None) -> CullResult:
    """Remove disallowed fields from ``manifest`` in place.

    :param manifest: Parsed ``package.json`` mapping; mutated.
    :param preserve: Extra field names to keep. Listing ``scripts`` keeps the
        whole ``scripts`` object verbatim.
    :return: CullResult wrapping the same mapping and the removals.
    """
    custom: List[str] = list(preserve or ())
    keep = allowed_fields(custom)
    result = CullResult(manifest=manifest)

    for key in list(manifest):
        if key not in keep:
            result.removed.append(key)
            del manifest[key]

    if "scripts" in manifest and "scripts" not in custom:
        _prune_scripts(manifest, result)

    if result.scripts_pruned:
        logger.info("pruned non-lifecycle scripts: %s", ", ".join(result.scripts_pruned))
    return result


def cull_manifest(path: str | os.PathLike, preserve: Iterable[str] | None = None) -> CullResult:
    """Load ``path``, cull it and write it back.

    Nothing is written when loading fails.

    :param path: Manifest file to rewrite.
    :param preserve: Extra field names to keep.
    :return: CullResult for the run.
    """
    manifest = load_manifest(path)
    result = cull_fields(manifest, preserve)
    write_manifest(path, result.manifest)
    logger.info("culled %s: %d field(s) removed", path, len(result.removed))
    return result
