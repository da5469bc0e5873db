import unittest

from botocore.exceptions import InvalidRegionError

from storacha_rclone.errors import AuthConfigError
from storacha_rclone.models import CredentialRecord, ObjectEntry
from storacha_rclone.session import RemoteSession


def make_record(**overrides):
    values = {
        "access_key_id": "AKIAEXAMPLE",
        "secret_access_key": "super-secret",
        "region": "us-east-1",
        "bucket": "my-bucket",
    }
    values.update(overrides)
    return CredentialRecord(**values)


class FakeS3Client:
    def __init__(self, list_response=None, body=None):
        self.list_response = list_response or {"IsTruncated": False}
        self.body = body
        self.list_objects_kwargs = []
        self.get_object_kwargs = []

    def list_objects_v2(self, **kwargs):
        self.list_objects_kwargs.append(kwargs)
        return self.list_response

    def get_object(self, **kwargs):
        self.get_object_kwargs.append(kwargs)
        return {"Body": self.body}


class RemoteSessionTests(unittest.TestCase):
    def test_from_record_passes_static_credentials_and_region(self):
        factory_calls = []
        fake_client = FakeS3Client()

        def factory(*args, **kwargs):
            factory_calls.append((args, kwargs))
            return fake_client

        session = RemoteSession.from_record(make_record(), client_factory=factory)

        self.assertIs(fake_client, session.client)
        self.assertEqual("my-bucket", session.bucket)
        self.assertEqual("us-east-1", session.region)
        args, kwargs = factory_calls[0]
        self.assertEqual(("s3",), args)
        self.assertEqual("us-east-1", kwargs["region_name"])
        self.assertEqual("AKIAEXAMPLE", kwargs["aws_access_key_id"])
        self.assertEqual("super-secret", kwargs["aws_secret_access_key"])
        self.assertEqual({"total_max_attempts": 1}, kwargs["config"].retries)

    def test_from_record_builds_real_client(self):
        session = RemoteSession.from_record(make_record(region="eu-west-1"))

        self.assertEqual("eu-west-1", session.client.meta.region_name)

    def test_malformed_region_raises_auth_config_error(self):
        with self.assertRaises(AuthConfigError) as ctx:
            RemoteSession.from_record(make_record(region="not a region!"))

        self.assertNotIn("super-secret", str(ctx.exception))

    def test_factory_errors_are_wrapped(self):
        def factory(*_, **__):
            raise InvalidRegionError(region_name="bad")

        with self.assertRaises(AuthConfigError):
            RemoteSession.from_record(make_record(), client_factory=factory)

    def test_list_page_omits_absent_prefix_and_token(self):
        fake_client = FakeS3Client(
            {
                "Contents": [{"Key": "a.txt", "Size": 3}, {"Key": "b.txt", "Size": 0}],
                "IsTruncated": True,
                "NextContinuationToken": "token-1",
            }
        )
        session = RemoteSession(fake_client, bucket="my-bucket", region="us-east-1")

        page = session.list_page("my-bucket")

        self.assertEqual([{"Bucket": "my-bucket"}], fake_client.list_objects_kwargs)
        self.assertEqual([ObjectEntry("a.txt", 3), ObjectEntry("b.txt", 0)], page.entries)
        self.assertEqual("token-1", page.next_token)
        self.assertTrue(page.truncated)

    def test_list_page_passes_prefix_and_token_verbatim(self):
        fake_client = FakeS3Client()
        session = RemoteSession(fake_client, bucket="my-bucket", region="us-east-1")

        page = session.list_page("my-bucket", "logs/", "")

        self.assertEqual(
            [{"Bucket": "my-bucket", "Prefix": "logs/", "ContinuationToken": ""}],
            fake_client.list_objects_kwargs,
        )
        self.assertEqual([], page.entries)
        self.assertIsNone(page.next_token)
        self.assertFalse(page.truncated)

    def test_get_object_returns_body(self):
        body = object()
        fake_client = FakeS3Client(body=body)
        session = RemoteSession(fake_client, bucket="my-bucket", region="us-east-1")

        self.assertIs(body, session.get_object("my-bucket", "a.txt"))
        self.assertEqual([{"Bucket": "my-bucket", "Key": "a.txt"}], fake_client.get_object_kwargs)


if __name__ == "__main__":
    unittest.main()
