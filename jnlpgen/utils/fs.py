import logging
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from jnlpgen.errors import JnlpError

logger = logging.getLogger(__name__)


class FilesystemError(JnlpError):
    exit_code = 12


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to create directory: {path}"
        ) from exc


@contextmanager
def open_output(path: Path) -> Iterator[BinaryIO]:
    """Open ``path`` for writing and always close it on the way out.

    Errors raised while closing are logged and dropped so they never
    replace the outcome of the write itself.
    """

    ensure_dir(path.parent)

    try:
        stream = path.open("wb")
    except OSError as exc:
        raise FilesystemError(
            f"Failed to open output file: {path}"
        ) from exc

    try:
        yield stream
    finally:
        try:
            stream.close()
        except OSError as exc:
            logger.debug("Ignoring error while closing %s: %s", path, exc)
