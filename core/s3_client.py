# core/s3_client.py

import boto3
from typing import Tuple

from core.config import settings


def get_s3() -> Tuple[boto3.client, str, str]:
    """
    Get S3 client, bucket name, and region.
    Returns: (s3_client, bucket_name, region)
    Raises RuntimeError if AWS credentials are missing.
    """
    key = settings.AWS_ACCESS_KEY_ID
    secret = settings.AWS_SECRET_ACCESS_KEY
    bucket = settings.AWS_BUCKET_NAME
    region = settings.AWS_REGION

    if not all([key, secret, bucket]):
        raise RuntimeError("Missing AWS credentials")

    client = boto3.client(
        "s3",
        aws_access_key_id=key,
        aws_secret_access_key=secret,
        region_name=region,
    )

    return client, bucket, region


def public_url(bucket: str, region: str, key: str) -> str:
    return f"https://{bucket}.s3.{region}.amazonaws.com/{key}"
