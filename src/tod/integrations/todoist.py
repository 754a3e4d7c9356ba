# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Todoist API reads for Tod."""

import logging
import os

import requests

from tod.errors import TodError
from tod.tasks.model import Task

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.todoist.com"
TASKS_URL = "/api/v1/tasks"
FILTER_URL = "/api/v1/tasks/filter"
TIMEOUT = 30  # seconds


def get_token() -> str:
    """Read the API token from TODOIST_API_KEY.

    Raises:
        TodError: If the variable is unset
    """
    api_key = os.environ.get("TODOIST_API_KEY")
    if not api_key:
        raise TodError("TODOIST_API_KEY not set")
    return api_key


def _base_url() -> str:
    return os.environ.get("TODOIST_API_URL", DEFAULT_BASE_URL).rstrip("/")


def _get_pages(path: str, token: str, params: dict | None = None) -> list[dict]:
    """GET a paginated v1 endpoint and return all results.

    Args:
        path: Endpoint path, e.g. TASKS_URL
        token: Todoist API token
        params: Extra query parameters

    Returns:
        Result dicts from every page, in API order

    Raises:
        TodError: On HTTP errors or an unexpected response body
    """
    results: list[dict] = []
    params = dict(params or {})

    while True:
        try:
            response = requests.get(
                f"{_base_url()}{path}",
                headers={"Authorization": f"Bearer {token}"},
                params=dict(params),
                timeout=TIMEOUT,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise TodError(f"Todoist request to {path} failed: {e}") from e
        except ValueError as e:
            raise TodError(f"Todoist returned invalid JSON from {path}: {e}") from e

        if not isinstance(body, dict) or "results" not in body:
            raise TodError(f"Unexpected Todoist response from {path}")

        results.extend(body["results"])
        cursor = body.get("next_cursor")
        if not cursor:
            return results
        logger.debug(f"Fetching next page of {path}")
        params["cursor"] = cursor


def fetch_tasks(token: str, filter_query: str | None = None) -> list[Task]:
    """Fetch active tasks, optionally matching a Todoist filter.

    Args:
        token: Todoist API token
        filter_query: Todoist filter string (e.g., "today", "@home")

    Returns:
        Tasks in Todoist's order
    """
    if filter_query:
        raw = _get_pages(FILTER_URL, token, {"query": filter_query})
    else:
        raw = _get_pages(TASKS_URL, token)

    tasks = []
    for item in raw:
        try:
            tasks.append(Task.from_dict(item))
        except (KeyError, ValueError, TypeError) as e:
            raise TodError(f"Malformed task in Todoist response: {e}") from e

    logger.info(f"Fetched {len(tasks)} tasks")
    return tasks
