"""Normalization of user-supplied filenames into safe storage keys."""

import re

FALLBACK_NAME = "file"

_EMOJI_RE = re.compile("[\U0001F300-\U0001F9FF]")
_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s-]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
_HYPHENS_RE = re.compile(r"-+")
_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def split_extension(filename: str) -> tuple[str, str]:
    """Split at the last dot; a dot at index 0 does not start an extension.

    The returned extension keeps its leading dot.
    """
    last_dot = filename.rfind(".")
    if last_dot > 0:
        return filename[:last_dot], filename[last_dot:]
    return filename, ""


def sanitize_filename(filename: str) -> str:
    """Return a lower-case, hyphenated, storage-safe version of filename.

    The extension is reattached verbatim. A base name with nothing left after
    normalization becomes "file".
    """
    base, extension = split_extension(filename)

    base = _EMOJI_RE.sub("", base)
    base = _DISALLOWED_RE.sub("-", base)
    base = _WHITESPACE_RE.sub("-", base)
    base = _HYPHENS_RE.sub("-", base)
    base = base.strip("-").lower()

    return f"{base or FALLBACK_NAME}{extension}"


def is_uuid(value: str) -> bool:
    return _UUID_RE.fullmatch(value) is not None


def sanitize_storage_path(path: str) -> str:
    """Sanitize every "/"-separated segment of a storage path.

    A UUID-shaped first segment is the owner namespace and is kept as is.
    """
    segments = path.split("/")
    return "/".join(
        segment if index == 0 and is_uuid(segment) else sanitize_filename(segment)
        for index, segment in enumerate(segments)
    )
