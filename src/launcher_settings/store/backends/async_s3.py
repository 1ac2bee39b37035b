"""
Defines a settings store backend that keeps the document as an object
in AWS S3, so settings can roam between machines.

Copyright (c) 2025 The launcher-settings authors.
All rights reserved.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os

import aioboto3
import botocore

from launcher_settings import config
from launcher_settings.exceptions import StoreOpenError, StoreWriteError
from launcher_settings.store.backends.base import DocumentStore


logger = logging.getLogger(__name__)

RETRIABLE_TOKENS = (
    'throttling',
    'requestlimit',
    'internal',
    'service',
    'unavailable',
)


def _error_code(err) -> str:
    return str(
        getattr(err, 'response', {}).get('Error', {}).get('Code', '')
    )


def _get_region() -> str:
    """
    Determines AWS region in order of priority:
    1. AWS_REGION configuration value
    2. AWS_REGION environment variable
    3. AWS_DEFAULT_REGION environment variable
    4. 'us-east-1'
    """
    region = (
        config.get('AWS_REGION')
        or os.environ.get('AWS_REGION')
        or os.environ.get('AWS_DEFAULT_REGION')
        or 'us-east-1'
    )
    return region


class AsyncS3Backend(DocumentStore):
    """
    Async backend that stores the settings document in S3 using
    aioboto3. The object key is the store path.
    """

    def __init__(self, path, bucket, region, document=None,
                 auto_persist=True, session=None, max_retries=3,
                 backoff_base=0.5, backoff_factor=2.0):
        super().__init__(path, document, auto_persist=auto_persist)
        self.bucket = bucket
        self.region = region
        self._session = session or aioboto3.Session()
        self._max_retries = max_retries
        self._backoff_base = backoff_base
        self._backoff_factor = backoff_factor

    @classmethod
    async def open(cls, path, auto_persist=True, bucket=None, region=None,
                   **kwargs):
        bucket = bucket or config.resolve('S3_BUCKET')
        if not bucket:
            raise StoreOpenError('No S3 bucket configured for settings')
        backend = cls(
            path,
            bucket,
            region or _get_region(),
            auto_persist=auto_persist,
            **kwargs
        )
        backend._document = await backend._with_retries(
            backend._fetch,
            StoreOpenError,
            f'Failed to load settings from s3://{bucket}/{path}'
        )
        return backend

    async def _fetch(self):
        async with self._session.client(
            's3',
            region_name=self.region
        ) as client:
            try:
                response = await client.get_object(
                    Bucket=self.bucket,
                    Key=self.path,
                )
            except botocore.exceptions.ClientError as err:
                if _error_code(err) in ('NoSuchKey', '404'):
                    return {}
                raise
            body = await response['Body'].read()
        try:
            document = json.loads(body)
            if not isinstance(document, dict):
                raise ValueError('settings document root is not an object')
        except ValueError:
            logger.warning(
                'Settings object s3://%s/%s is corrupt; starting empty',
                self.bucket,
                self.path,
            )
            return {}
        return document

    async def _write(self, document):
        body = json.dumps(document, indent=2, sort_keys=True)

        async def upload():
            async with self._session.client(
                's3',
                region_name=self.region
            ) as client:
                await client.put_object(
                    Bucket=self.bucket,
                    Key=self.path,
                    Body=body.encode('utf-8'),
                    ContentType='application/json',
                )

        await self._with_retries(
            upload,
            StoreWriteError,
            f'Failed to save settings to s3://{self.bucket}/{self.path}'
        )

    async def _with_retries(self, operation, error_class, message):
        """
        Run operation, retrying transient AWS failures with exponential
        backoff.
        """
        attempt = 0
        last_exception = None
        while attempt <= self._max_retries:
            try:
                return await operation()
            except botocore.exceptions.ClientError as err:
                # Throttling and 5xx style codes are worth another try
                code = _error_code(err).lower()
                retriable = any(token in code for token in RETRIABLE_TOKENS)
                last_exception = err
                attempt += 1
                if attempt > self._max_retries or not retriable:
                    break
            except (
                botocore.exceptions.EndpointConnectionError,
                asyncio.TimeoutError
            ) as exc:
                last_exception = exc
                attempt += 1
                if attempt > self._max_retries:
                    break
            except Exception as exc:
                # Unknown error; do not retry
                last_exception = exc
                break
            logger.warning(
                '%s (attempt %d of %d); retrying',
                message,
                attempt,
                self._max_retries + 1,
            )
            await asyncio.sleep(
                self._backoff_base
                * (self._backoff_factor ** (attempt - 1))
            )
        raise error_class(message) from last_exception
