"""Manifest parsing: the current version of the project.

The manifest is a JSON object (typically `package.json`) with a `version`
field. The version is not interpreted, only read.
"""

from __future__ import annotations

import json

from autorelease.core.config import ConfigError
from autorelease.core.result import Err, Ok, Result
from autorelease.core.structured import as_str_dict
from autorelease.platform.files import FileAccess
from autorelease.release.changelog import is_blank
from autorelease.release.errors import ParseError, RunError

__all__ = ["parse_manifest_version", "read_current_version"]


def parse_manifest_version(content: str) -> Result[str, ParseError]:
    """Return the manifest's `version` field.

    Absent, null and falsy values all yield "". A root that is not a JSON
    object has no fields and also yields "".

    Returns:
        Ok(version) for any valid JSON, Err(ParseError) otherwise
    """
    try:
        obj: object = json.loads(content)
    except json.JSONDecodeError as e:
        return Err(ParseError(f"invalid JSON: {e}"))

    data = as_str_dict(obj)
    if data is None:
        return Ok("")

    value = data.get("version")
    if not value:
        return Ok("")
    if isinstance(value, str):
        return Ok(value)
    return Ok(json.dumps(value))


def read_current_version(files: FileAccess, path: str) -> Result[str, RunError]:
    """Read and parse the manifest at path.

    Returns:
        Ok(version) with a non-blank version, or Err with ConfigError
        (missing manifest, no version), FileReadError or ParseError
    """
    if not files.exists(path):
        return Err(ConfigError(f"manifest not found at: {path}", path=path))

    content = files.read_text(path)
    if isinstance(content, Err):
        return content

    parsed = parse_manifest_version(content.value)
    if isinstance(parsed, Err):
        return Err(
            ParseError(
                f"failed to read version from {path}: {parsed.error.message}",
                path=path,
            )
        )

    if is_blank(parsed.value):
        return Err(ConfigError("no version found in manifest", path=path))
    return parsed
