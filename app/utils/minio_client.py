# app/utils/minio_client.py

import io
import json
import mimetypes
import os
import uuid

from minio import Minio
from minio.error import S3Error

from app.config.settings import (
    MINIO_ENDPOINT,
    MINIO_PUBLIC_ENDPOINT,
    MINIO_ROOT_USER,
    MINIO_ROOT_PASSWORD,
    MINIO_SECURE,
)
from app.utils.logger import logger
from app.utils.prometheus_metrics import record_external_call
from app.utils.slug_utils import make_slug


class StorageError(Exception):
    """Object storage call failed."""


def create_minio_client() -> Minio:
    """Builds a MinIO client from the environment settings."""
    return Minio(
        endpoint=MINIO_ENDPOINT,
        access_key=MINIO_ROOT_USER,
        secret_key=MINIO_ROOT_PASSWORD,
        secure=MINIO_SECURE,
    )


# Global MinIO client (lazy initialization)
client = None


def get_minio_client():
    """Returns the MinIO client, creating it on first use."""
    global client
    if client is None:
        client = create_minio_client()
    return client


def bucket_name_for(value: str) -> str:
    """Safe bucket name (lowercase, dashes, at most 63 chars)."""
    return make_slug(value, max_length=63)


def public_url(bucket_name: str, object_name: str) -> str:
    return f"{MINIO_PUBLIC_ENDPOINT}/{bucket_name}/{object_name}"


def object_extension(filename: str, content_type: str) -> str:
    """Extension without the dot, from the file name or else the content type."""
    ext = os.path.splitext(filename or "")[1]
    if not ext:
        ext = mimetypes.guess_extension(content_type or "") or ".bin"
    return ext.lstrip(".").lower()


def configure_public_policy(bucket_name: str):
    """Allows anonymous downloads of every object in the bucket."""
    policy = {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"AWS": ["*"]},
                "Action": ["s3:GetObject"],
                "Resource": [f"arn:aws:s3:::{bucket_name}/*"],
            }
        ],
    }
    get_minio_client().set_bucket_policy(bucket_name, json.dumps(policy))
    logger.info(f"[MinIO] Public read policy set for bucket: {bucket_name}")


def ensure_bucket(bucket_name: str):
    minio = get_minio_client()
    if minio.bucket_exists(bucket_name):
        return
    logger.info(f"[MinIO] Creating bucket: {bucket_name}")
    minio.make_bucket(bucket_name)
    configure_public_policy(bucket_name)


def upload_bytes(bucket_name: str, object_name: str, data: bytes, content_type: str) -> str:
    """
    Stores ``data`` at ``bucket_name/object_name`` and returns its public URL.
    Raises StorageError when MinIO is unreachable or rejects the upload.
    """
    logger.info(f"[MinIO] Upload - bucket={bucket_name} key={object_name} size={len(data)} content_type={content_type}")
    try:
        ensure_bucket(bucket_name)
        get_minio_client().put_object(
            bucket_name=bucket_name,
            object_name=object_name,
            data=io.BytesIO(data),
            length=len(data),
            content_type=content_type or "application/octet-stream",
        )
    except (S3Error, OSError, ValueError) as e:
        record_external_call("minio", "put_object", ok=False)
        logger.error(f"[MinIO] Upload failed - bucket={bucket_name} key={object_name}: {e}")
        raise StorageError(f"Upload failed: {e}") from e

    record_external_call("minio", "put_object", ok=True)
    url = public_url(bucket_name, object_name)
    logger.info(f"[MinIO] URL: {url}")
    return url


def remove_object(bucket_name: str, object_name: str):
    logger.info(f"[MinIO] Remove - bucket={bucket_name} key={object_name}")
    try:
        get_minio_client().remove_object(bucket_name, object_name)
    except (S3Error, OSError, ValueError) as e:
        record_external_call("minio", "remove_object", ok=False)
        logger.error(f"[MinIO] Remove failed - bucket={bucket_name} key={object_name}: {e}")
        raise StorageError(f"Remove failed: {e}") from e
    record_external_call("minio", "remove_object", ok=True)


def random_object_name(prefix: str, ext: str) -> str:
    return f"{prefix}/{uuid.uuid4().hex}.{ext}"
