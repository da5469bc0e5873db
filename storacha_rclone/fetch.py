from __future__ import annotations
"""Download of a single object to local disk."""
from contextlib import closing
import logging
from typing import Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .errors import CopyError, LocalCreateError, RemoteFetchError, UsageError
from .models import DownloadResult
from .session import RemoteSession
from .utils import derive_destination

CHUNK_SIZE = 1024 * 1024

LOGGER = logging.getLogger(__name__)


def fetch_object(
    session: RemoteSession,
    key: str,
    destination: str | None = None,
    *,
    bucket: str | None = None,
    progress_callback: Optional[Callable[[int], None]] = None,
    chunk_size: int = CHUNK_SIZE,
) -> DownloadResult:
    """Stream ``key`` into ``destination`` and report the bytes written.

    When ``destination`` is omitted the file is named after the last path
    segment of ``key`` and written to the current directory. A file that
    was partially written before a failure is left on disk.

    Raises:
        UsageError: when ``key`` is empty or no file name can be derived.
        RemoteFetchError: when the object cannot be opened remotely.
        LocalCreateError: when the destination cannot be created.
        CopyError: when the transfer is interrupted.
    """

    if not key:
        raise UsageError("an object key is required")
    target = destination or derive_destination(key)
    bucket_name = bucket or session.bucket

    try:
        body = session.get_object(bucket_name, key)
    except (ClientError, BotoCoreError) as exc:
        raise RemoteFetchError(f"GetObject {bucket_name}/{key} failed: {exc}") from exc

    with closing(body):
        try:
            handle = open(target, "wb")
        except OSError as exc:
            raise LocalCreateError(f"cannot create {target}: {exc.strerror or exc}") from exc
        with handle:
            written = _copy_stream(body, handle, chunk_size, progress_callback)

    LOGGER.debug("Downloaded %s/%s to %s (%d bytes)", bucket_name, key, target, written)
    return DownloadResult(bytes_written=written, destination_path=target)


def _copy_stream(body, handle, chunk_size: int, progress_callback) -> int:
    written = 0
    try:
        while True:
            chunk = body.read(chunk_size)
            if not chunk:
                break
            handle.write(chunk)
            written += len(chunk)
            if progress_callback:
                progress_callback(written)
    except (BotoCoreError, OSError) as exc:
        raise CopyError(f"transfer interrupted after {written} bytes: {exc}") from exc
    return written
