"""GitHub Checks API client for the check-run lifecycle."""
from typing import Any

import httpx

from rubocop_checks.errors import RemoteApiError
from rubocop_checks.logging_config import get_logger
from rubocop_checks.models import Annotation, CheckSummary

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"
# The Checks API accepts at most 50 annotations per request.
MAX_ANNOTATIONS_PER_REQUEST = 50
CHECKS_MEDIA_TYPE = "application/vnd.github.antiope-preview+json"


def create_batches(items: list[Any], batch_size: int) -> list[list[Any]]:
    """Split items into batches.

    Args:
        items: List of items to batch
        batch_size: Number of items per batch

    Returns:
        List of batches
    """
    return [items[i : i + batch_size] for i in range(0, len(items), batch_size)]


class CheckRunClient:
    """Creates and closes one check run for a repository.

    Args:
        repository: ``owner/name`` slug
        token: Bearer token with ``checks:write``
        api_url: API root, e.g. ``https://api.github.com``
        timeout: Request timeout in seconds
        transport: Optional httpx transport, used by tests
    """

    def __init__(
        self,
        repository: str,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        max_annotations_per_request: int = MAX_ANNOTATIONS_PER_REQUEST,
    ) -> None:
        self.repository = repository
        self.max_annotations_per_request = max_annotations_per_request
        self._http = httpx.Client(
            base_url=api_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "Accept": f"{CHECKS_MEDIA_TYPE}, application/json",
            },
        )

    def __enter__(self) -> "CheckRunClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._http.close()

    @property
    def check_runs_path(self) -> str:
        return f"/repos/{self.repository}/check-runs"

    def _request(self, method: str, path: str, body: dict[str, Any]) -> httpx.Response:
        try:
            response = self._http.request(method, path, json=body)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {type(e).__name__}: {e}")
            raise RemoteApiError(None, str(e)) from e

        if not response.is_success:
            logger.error(f"{method} {path} returned HTTP {response.status_code}")
            raise RemoteApiError(response.status_code, response.text)
        return response

    def create(self, head_sha: str, started_at: str, name: str) -> int:
        """Open an in-progress check run.

        Args:
            head_sha: Commit the check run is attached to
            started_at: ISO-8601 UTC timestamp
            name: Check run name shown in the UI

        Returns:
            Id of the created check run

        Raises:
            RemoteApiError: If the request fails or the response has no id
        """
        body = {
            "name": name,
            "status": "in_progress",
            "head_sha": head_sha,
            "started_at": started_at,
        }
        response = self._request("POST", self.check_runs_path, body)

        try:
            check_run_id = response.json()["id"]
        except (ValueError, KeyError, TypeError) as e:
            raise RemoteApiError(
                response.status_code, f"response has no check run id: {response.text}"
            ) from e

        logger.info(f"Created check run {check_run_id} for {head_sha}")
        return int(check_run_id)

    def close(
        self, check_run_id: int, summary: CheckSummary, annotations: list[Annotation]
    ) -> int:
        """Complete a check run, posting annotations in API-sized chunks.

        Every chunk but the last is an output-only update; the last request
        carries the conclusion, which completes the run. With no annotations
        a single closing request is sent.

        Args:
            check_run_id: Id returned by create()
            summary: Conclusion and output text
            annotations: Annotations to attach, in display order

        Returns:
            Number of update requests issued

        Raises:
            RemoteApiError: On the first failed update, with ``requests_made``
                counting the updates sent so far
        """
        path = f"{self.check_runs_path}/{check_run_id}"
        chunks = create_batches(annotations, self.max_annotations_per_request) or [[]]

        for index, chunk in enumerate(chunks):
            body: dict[str, Any] = {
                "output": {
                    "title": summary.title,
                    "summary": summary.summary,
                    "annotations": [a.to_payload() for a in chunk],
                }
            }
            if index == len(chunks) - 1:
                body["status"] = "completed"
                body["conclusion"] = summary.conclusion.value
            try:
                self._request("PATCH", path, body)
            except RemoteApiError as e:
                e.requests_made = index + 1
                raise
            logger.debug(f"Sent update {index + 1}/{len(chunks)} with {len(chunk)} annotation(s)")

        logger.info(
            f"Closed check run {check_run_id} as {summary.conclusion.value} "
            f"with {len(annotations)} annotation(s)"
        )
        return len(chunks)
