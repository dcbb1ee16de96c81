"""Local staging of multipart uploads before they are sent to Drive."""
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from typing import BinaryIO, Iterator

logger = logging.getLogger(__name__)


@contextmanager
def staged_upload(source: BinaryIO, directory: str) -> Iterator[str]:
    """
    Copy an uploaded stream to a uniquely named file and remove it on exit.

    The file is removed whether the body of the ``with`` block succeeds or raises.
    A failure to remove it is logged and never propagated.

    :param source: Readable binary stream of the uploaded part.
    :param directory: Shared writable directory for staged files.
    """
    with tempfile.NamedTemporaryFile(dir=directory, prefix="upload-", delete=False) as tmp:
        path = tmp.name
        try:
            shutil.copyfileobj(source, tmp)
        except BaseException:
            tmp.close()
            _remove(path)
            raise

    try:
        yield path
    finally:
        _remove(path)


def _remove(path: str) -> None:
    try:
        os.remove(path)
    except OSError as e:
        logger.error(f"Error deleting temp file {path}: {e}")
