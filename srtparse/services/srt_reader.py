"""Load SRT files from disk as raw byte buffers."""

import logging
from pathlib import Path

from srtparse.core.exceptions import SRTFileError

logger = logging.getLogger(__name__)


def read_srt_file(
    path: str | Path,
    *,
    allowed_extensions: set[str] | frozenset[str] = frozenset({".srt"}),
    max_file_size: int | None = None,
) -> bytes:
    """Read a subtitle file into memory.

    Args:
        path: Filesystem path of the subtitle file
        allowed_extensions: Accepted file suffixes, compared case-insensitively
        max_file_size: Maximum accepted size in bytes (None for no limit)

    Returns:
        Full file contents

    Raises:
        SRTFileError: If the extension is not allowed or the file cannot be read
    """
    path = Path(path)
    allowed = {extension.lower() for extension in allowed_extensions}

    if path.suffix.lower() not in allowed:
        raise SRTFileError(
            f"Unsupported file extension {path.suffix!r}. Allowed: {', '.join(sorted(allowed))}",
            path=str(path),
        )

    try:
        if not path.is_file():
            raise SRTFileError(f"SRT file not found: {path}", path=str(path))

        size = path.stat().st_size
        if max_file_size is not None and size > max_file_size:
            raise SRTFileError(
                f"File too large: {size} bytes (limit {max_file_size} bytes)",
                path=str(path),
            )

        content = path.read_bytes()
    except OSError as e:
        logger.error("Error reading SRT file %s: %s", path, e)
        raise SRTFileError(f"Failed to read SRT file {path}: {e}", path=str(path)) from e

    logger.debug("Read %d bytes from %s", len(content), path)
    return content
