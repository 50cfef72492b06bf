"""
Director client for running errands on a deployment.

Starts an errand run, follows the resulting director task until it
finishes and reads the errand result from the task output.
"""

import json
import logging
import re
import time
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from errandctl.config.provider import DirectorConfig
from errandctl.modules.api.models import ErrandResult, TaskState

from .interfaces import DirectorError

logger = logging.getLogger("errandctl.director")

REDIRECT_CODES = (301, 302, 303, 307, 308)
TASK_PATH_RE = re.compile(r"/tasks/(\d+)")


def create_http_client(config: DirectorConfig) -> httpx.Client:
    """Create an HTTP client for the configured director."""
    auth = (config.client, config.client_secret) if config.has_credentials else None
    return httpx.Client(
        base_url=config.url,
        auth=auth,
        verify=config.verify,
        timeout=config.request_timeout,
        follow_redirects=False,
    )


class DirectorDeployment:
    """Errand execution against one deployment of a director."""

    def __init__(
        self,
        config: DirectorConfig,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize director deployment.

        Args:
            config: Director connection configuration
            http_client: Pre-built client (tests, shared sessions); one is
                created from config otherwise and closed by close()
        """
        self.deployment = config.deployment
        self.poll_interval = config.poll_interval
        self._owns_client = http_client is None
        self.client = http_client or create_http_client(config)

        if config.url.startswith("http://"):
            logger.warning("Using HTTP without TLS - credentials are sent in clear text")

    def __enter__(self) -> "DirectorDeployment":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def run_errand(self, name: str, keep_alive: bool) -> ErrandResult:
        """
        Run an errand and block until its task finishes.

        Args:
            name: Errand name
            keep_alive: Keep errand instances running afterwards

        Returns:
            Errand result reported by the director

        Raises:
            DirectorError: if the task cannot be started, does not finish
                successfully or reports no usable result
        """
        task_id = self._start_errand(name, keep_alive)
        logger.info(f"Errand '{name}' started as task {task_id}")

        task = self._wait_for_task(task_id)
        state = TaskState(task["state"])
        logger.info(f"Task {task_id} finished with state '{state.value}'")

        if state != TaskState.DONE:
            message = task.get("result") or "no details"
            raise DirectorError(f"Task {task_id} {state.value}: {message}")

        return self._read_result(task_id)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise DirectorError(f"Director request {method} {path} failed: {e}") from e

        if response.status_code >= 400:
            raise DirectorError(
                f"Director responded with {response.status_code} to {method} {path}: "
                f"{response.text.strip()}"
            )
        return response

    def _start_errand(self, name: str, keep_alive: bool) -> str:
        path = (
            f"/deployments/{quote(self.deployment, safe='')}"
            f"/errands/{quote(name, safe='')}/runs"
        )
        payload = {"keep-alive": keep_alive, "when-changed": False, "instances": []}

        response = self._request("POST", path, json=payload)

        if response.status_code in REDIRECT_CODES:
            location = response.headers.get("Location", "")
            match = TASK_PATH_RE.search(location)
            if not match:
                raise DirectorError(f"Unexpected task location '{location}' for errand '{name}'")
            return match.group(1)

        try:
            return str(response.json()["id"])
        except (ValueError, KeyError, TypeError) as e:
            raise DirectorError(f"Director returned no task for errand '{name}': {e}") from e

    def _wait_for_task(self, task_id: str) -> Dict[str, Any]:
        # No deadline: errands may legitimately run for hours
        while True:
            response = self._request("GET", f"/tasks/{task_id}")
            try:
                task = response.json()
                state = TaskState(task["state"])
            except (ValueError, KeyError, TypeError) as e:
                raise DirectorError(f"Unreadable state for task {task_id}: {e}") from e

            logger.debug(f"Task {task_id} state: {state.value}")
            if state.is_finished:
                return task

            time.sleep(self.poll_interval)

    def _read_result(self, task_id: str) -> ErrandResult:
        response = self._request("GET", f"/tasks/{task_id}/output", params={"type": "result"})

        lines = [line for line in response.text.splitlines() if line.strip()]
        if not lines:
            raise DirectorError(f"Task {task_id} reported no errand result")

        try:
            return ErrandResult.from_director_payload(json.loads(lines[0]))
        except json.JSONDecodeError as e:
            raise DirectorError(f"Failed to parse result of task {task_id}: {e}") from e
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise DirectorError(f"Invalid errand result in task {task_id}: {e}") from e
