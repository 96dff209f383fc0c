"""Utility functions for loading and parsing JSON data.

This module provides functions for loading JSON from files and URLs with
proper error handling, and a lenient parser for the generation core.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def json_object(text: str | bytes | None) -> dict | list | None:
    """Parse JSON text whose root is an object or array.

    Empty input, malformed JSON and bare scalar roots all give None; this
    never raises for bad input.

    Args:
        text: JSON text (str or UTF-8 bytes).

    Returns:
        The parsed dict or list, or None.
    """
    if not text:
        return None

    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug(f"Text is not valid JSON: {e}")
        return None

    if not isinstance(value, (dict, list)):
        logger.debug(f"JSON root is a {type(value).__name__}, not an object or array")
        return None

    return value


def _require_container(data: Any, source: str) -> Any:
    """Reject documents whose root cannot become a declaration."""
    if not isinstance(data, (dict, list)):
        logger.error(f"JSON root in {source} is a {type(data).__name__}")
        raise JSONLoaderError(
            f"JSON root in {source} must be an object or array, "
            f"got {type(data).__name__}"
        )
    return data


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load a JSON document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON object or array).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read, JSON is invalid, or the
            root is a bare scalar.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded JSON from {file_path}")
    return str(file_path), _require_container(data, str(file_path))


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load a JSON document from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON object or array).

    Raises:
        JSONLoaderError: If URL is invalid, request fails, the response
            isn't valid JSON, or its root is a bare scalar.
    """
    logger.debug(f"Attempting to load JSON from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}")
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}")
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info(f"Loaded JSON from {url}")
    return url, _require_container(data, url)


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load a JSON document from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON object or array).

    Raises:
        JSONLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        raise JSONLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)
