from __future__ import annotations
"""Lazy, page-by-page enumeration of a bucket listing."""
import logging
from typing import Iterator

from botocore.exceptions import BotoCoreError, ClientError

from .errors import RemoteListError
from .models import ListingPage, ObjectEntry
from .session import RemoteSession

LOGGER = logging.getLogger(__name__)


def iter_pages(
    session: RemoteSession,
    bucket: str | None = None,
    prefix: str | None = None,
) -> Iterator[ListingPage]:
    """Yield listing pages until the service reports the listing is complete.

    The next page is requested only once the caller advances past the
    current one. A truncated page's token is passed back unchanged, even
    when it is missing, so a truncated page without a token causes a
    follow-up request without a token.

    Raises:
        RemoteListError: when any page request fails. Pages already
            yielded are not retracted.
    """

    bucket_name = bucket or session.bucket
    token: str | None = None
    page_number = 1
    while True:
        try:
            page = session.list_page(bucket_name, prefix, token)
        except (ClientError, BotoCoreError) as exc:
            LOGGER.debug("Listing page %d of '%s' failed", page_number, bucket_name)
            raise RemoteListError(f"ListObjectsV2 on bucket '{bucket_name}' failed: {exc}") from exc
        LOGGER.debug(
            "Listed page %d of '%s': %d objects, truncated=%s",
            page_number,
            bucket_name,
            len(page.entries),
            page.truncated,
        )
        yield page
        if not page.truncated:
            return
        token = page.next_token
        page_number += 1


def list_objects(
    session: RemoteSession,
    bucket: str | None = None,
    prefix: str | None = None,
) -> Iterator[ObjectEntry]:
    """Yield every object under ``prefix`` in the order the service returns them."""

    for page in iter_pages(session, bucket, prefix):
        yield from page.entries
