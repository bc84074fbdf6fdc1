import time

from docupload.sanitize.filename import sanitize_filename, sanitize_storage_path


def build_storage_path(user_id: str, filename: str, timestamp_ms: int | None = None) -> str:
    """Build "{user_id}/{timestamp_ms}-{sanitized filename}".

    The timestamp keeps repeated uploads of the same name from colliding.
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return sanitize_storage_path(f"{user_id}/{timestamp_ms}-{sanitize_filename(filename)}")
