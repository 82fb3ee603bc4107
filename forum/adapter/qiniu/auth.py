"""Qiniu request signing.

Upload tokens carry a signed put policy that limits the holder to one
object key for one hour. Management requests (delete) are signed with an
access token over the request path.

Reference: https://developer.qiniu.com/kodo/manual/1208/upload-token
"""

import hmac
import json
import time
from base64 import urlsafe_b64encode
from hashlib import sha1

# Upload policies are valid for one hour from creation
POLICY_TTL_SECONDS = 3600


def encode(data: bytes | str) -> str:
    """URL-safe base64 encode data.

    Standard base64 with ``+`` replaced by ``-`` and ``/`` by ``_``;
    padding is kept.

    Args:
        data: Bytes, or text encoded as UTF-8

    Returns:
        Encoded ASCII string
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return urlsafe_b64encode(data).decode("ascii")


def sign(data: bytes | str, secret_key: str) -> str:
    """HMAC-SHA1 sign data with the account secret key.

    Args:
        data: Data to sign
        secret_key: Qiniu secret key

    Returns:
        URL-safe base64 encoded signature
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    digest = hmac.new(secret_key.encode("utf-8"), data, sha1).digest()
    return encode(digest)


def build_upload_policy(bucket: str, path: str, now: int | None = None) -> str:
    """Build an encoded put policy for a single object.

    Args:
        bucket: Bucket name
        path: Object key the policy grants write access to
        now: Current unix time (defaults to the system clock)

    Returns:
        URL-safe base64 encoded JSON policy
    """
    if now is None:
        now = int(time.time())

    policy = {
        "scope": f"{bucket}:{path}",
        "deadline": now + POLICY_TTL_SECONDS,
    }

    return encode(json.dumps(policy, separators=(",", ":")))


def build_upload_token(
    access_key: str,
    secret_key: str,
    bucket: str,
    path: str,
    now: int | None = None,
) -> str:
    """Build an upload token for a single object.

    Format: ``<access_key>:<signature>:<policy>``

    Args:
        access_key: Qiniu access key
        secret_key: Qiniu secret key
        bucket: Bucket name
        path: Object key
        now: Current unix time (defaults to the system clock)

    Returns:
        Upload token string
    """
    policy = build_upload_policy(bucket, path, now=now)
    signature = sign(policy, secret_key)

    return f"{access_key}:{signature}:{policy}"


def build_access_token(access_key: str, secret_key: str, path: str) -> str:
    """Build a management access token for a request path.

    Format: ``<access_key>:<signature>`` where the signature covers the
    path followed by a newline. Access tokens carry no expiry.

    Args:
        access_key: Qiniu access key
        secret_key: Qiniu secret key
        path: Request path, e.g. ``/delete/<entry uri>``

    Returns:
        Access token string
    """
    signature = sign(f"{path}\n", secret_key)

    return f"{access_key}:{signature}"


def encode_entry_uri(bucket: str, path: str) -> str:
    """Encode a bucket/key pair for use in management URLs."""
    return encode(f"{bucket}:{path}")
