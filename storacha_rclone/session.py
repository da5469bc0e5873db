from __future__ import annotations
"""Authenticated S3 client handle built from a credential record."""
import logging
from typing import Callable

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError

from .errors import AuthConfigError
from .models import CredentialRecord, ListingPage, ObjectEntry

LOGGER = logging.getLogger(__name__)


class RemoteSession:
    """Binds one S3 client to a static credential pair, a region and a bucket."""

    def __init__(self, client, *, bucket: str, region: str):
        self.client = client
        self.bucket = bucket
        self.region = region

    @classmethod
    def from_record(
        cls,
        record: CredentialRecord,
        client_factory: Callable[..., object] | None = None,
    ) -> "RemoteSession":
        """Create a session for ``record``.

        Raises:
            AuthConfigError: when the client cannot be configured, e.g. the
                region name is malformed.
        """

        factory = client_factory or boto3.client
        # Credentials never refresh and requests are never retried.
        config = Config(signature_version="s3v4", retries={"total_max_attempts": 1})
        try:
            client = factory(
                "s3",
                region_name=record.region,
                aws_access_key_id=record.access_key_id,
                aws_secret_access_key=record.secret_access_key,
                config=config,
            )
        except (BotoCoreError, ValueError) as exc:
            raise AuthConfigError(f"cannot configure S3 client for region {record.region!r}: {exc}") from exc
        LOGGER.debug("Created S3 client for bucket '%s' in %s", record.bucket, record.region)
        return cls(client, bucket=record.bucket, region=record.region)

    def list_page(
        self,
        bucket: str,
        prefix: str | None = None,
        continuation_token: str | None = None,
    ) -> ListingPage:
        params = {"Bucket": bucket}
        if prefix:
            params["Prefix"] = prefix
        if continuation_token is not None:
            params["ContinuationToken"] = continuation_token
        response = self.client.list_objects_v2(**params)
        entries = [
            ObjectEntry(key=obj["Key"], size=int(obj.get("Size", 0)))
            for obj in response.get("Contents", [])
        ]
        return ListingPage(
            entries=entries,
            next_token=response.get("NextContinuationToken"),
            truncated=bool(response.get("IsTruncated", False)),
        )

    def get_object(self, bucket: str, key: str):
        """Return the streaming body of ``bucket/key``."""

        response = self.client.get_object(Bucket=bucket, Key=key)
        return response["Body"]
