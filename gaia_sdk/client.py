"""
Orchestrator-side client for talking to a running plugin.

Listing jobs is idempotent and retried with exponential backoff; executing a
job is sent exactly once.
"""

import asyncio
import json
import ssl
from typing import Any, Dict, List, Optional

import aiohttp
import structlog

from .core.constants import JOB_NOT_FOUND_MESSAGE
from .core.exceptions import JobNotFoundError, PluginClientError
from .models.enums import InputType
from .models.schemas import ArgumentSpec, JobDescriptor, JobResult
from .utils.retry import RetryConfig, RetryHandler

logger = structlog.get_logger(__name__)


def parse_job_stream(payload: str) -> List[JobDescriptor]:
    """
    Decode a newline-delimited stream of job descriptors.

    Args:
        payload: Response body, one JSON document per line

    Returns:
        Descriptors in stream order

    Raises:
        PluginClientError: If a line is not a valid descriptor
    """
    descriptors = []
    for line_number, line in enumerate(payload.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            descriptors.append(JobDescriptor.model_validate_json(line))
        except ValueError as e:
            raise PluginClientError(f"Invalid job descriptor on line {line_number}: {e}") from e
    return descriptors


class PluginClient:
    """HTTP client for the plugin's list and execute operations."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        ssl_context: Optional[ssl.SSLContext] = None,
        retry_config: Optional[RetryConfig] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.ssl_context = ssl_context
        self.session: Optional[aiohttp.ClientSession] = None
        self.retry_handler = RetryHandler(
            retry_config or RetryConfig(),
            retry_on=(aiohttp.ClientError, asyncio.TimeoutError)
        )

    async def __aenter__(self) -> "PluginClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def initialize(self):
        """Open the HTTP session."""
        if self.session is not None and not self.session.closed:
            return
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            connector=aiohttp.TCPConnector(
                ssl=self.ssl_context if self.ssl_context is not None else True
            )
        )
        logger.debug("Plugin client session opened", base_url=self.base_url)

    async def close(self):
        """Close HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()
            logger.debug("Plugin client session closed", base_url=self.base_url)

    def _require_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            raise PluginClientError("Client session is not initialized")
        return self.session

    async def list_jobs(self) -> List[JobDescriptor]:
        """Fetch the plugin's job catalog, in registry order."""
        return await self.retry_handler.execute_with_retry(self._fetch_jobs, "list_jobs")

    async def _fetch_jobs(self) -> List[JobDescriptor]:
        session = self._require_session()
        async with session.get(f"{self.base_url}/jobs") as response:
            if response.status != 200:
                await self._raise_for_error(response)
            payload = await response.text()

        descriptors = parse_job_stream(payload)
        logger.info("Listed plugin jobs", base_url=self.base_url, jobs=len(descriptors))
        return descriptors

    async def execute_job(self, descriptor: JobDescriptor) -> JobResult:
        """
        Execute a job once.

        Args:
            descriptor: Job descriptor carrying bound argument values

        Returns:
            JobResult reported by the plugin

        Raises:
            JobNotFoundError: If the plugin does not know the job id
            PluginClientError: On any other failed call
        """
        session = self._require_session()
        try:
            async with session.post(
                f"{self.base_url}/jobs/execute",
                json=descriptor.model_dump(mode="json")
            ) as response:
                if response.status == 200:
                    result = JobResult.model_validate(await response.json())
                    logger.info(
                        "Job executed",
                        job_id=descriptor.id, failed=result.failed, exit_pipeline=result.exit_pipeline
                    )
                    return result
                await self._raise_for_error(response, job_id=descriptor.id)
        except aiohttp.ClientError as e:
            raise PluginClientError(f"Execute request failed: {type(e).__name__}: {e}") from e

    async def execute(self, job_id: int, arguments: Optional[Dict[str, str]] = None) -> JobResult:
        """Execute a job by id with the given argument values."""
        descriptor = JobDescriptor(
            id=job_id,
            arguments=[
                ArgumentSpec(type=InputType.TEXT_FIELD, key=key, value=value)
                for key, value in (arguments or {}).items()
            ]
        )
        return await self.execute_job(descriptor)

    async def _raise_for_error(self, response: aiohttp.ClientResponse, job_id: Optional[int] = None) -> None:
        body: Dict[str, Any] = {}
        try:
            body = await response.json(content_type=None)
        except (ValueError, aiohttp.ContentTypeError):
            body = {"message": await response.text()}
        if not isinstance(body, dict):
            body = {"message": json.dumps(body)}

        if body.get("code") == "CANCELLED" or body.get("message") == JOB_NOT_FOUND_MESSAGE:
            raise JobNotFoundError(job_id)

        message = body.get("message") or body.get("detail") or f"HTTP {response.status}"
        raise PluginClientError(str(message), status_code=response.status, details=body)
