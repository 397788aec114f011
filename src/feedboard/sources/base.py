"""HTTP client and base class shared by the feed sources."""

from abc import ABC
from typing import Any, Dict, Mapping, Optional, Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from feedboard.errors import NetworkError, NotFound, PayloadError
from feedboard.utils.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def path_segment(value: str) -> str:
    """Quote a user-supplied value for use as a single URL path segment."""
    return quote(value.strip(), safe="")


class RemoteDataClient:
    """Thin GET-only JSON client over a :class:`requests.Session`.

    No retries. ``timeout=None`` leaves requests' default in place.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        default_params: Optional[Mapping[str, Any]] = None,
        source_name: str = "remote",
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.default_params = dict(default_params or {})
        self.source_name = source_name

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Issue a GET and return the decoded JSON body.

        Args:
            path: Path relative to the base URL
            params: Query parameters merged over the client defaults

        Returns:
            Parsed JSON (dict or list)

        Raises:
            NotFound: upstream answered 404
            NetworkError: transport failure, other non-2xx, or a non-JSON body
        """
        url = self.url_for(path)
        query = {**self.default_params, **(params or {})}
        logger.debug(f"[{self.source_name}] GET {url} params={sorted(query)}")

        try:
            response = self.session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"[{self.source_name}] Request to {url} failed: {e}")
            raise NetworkError(f"Request failed: {e}", url=url) from e

        if response.status_code == 404:
            logger.info(f"[{self.source_name}] Not found: {url}")
            raise NotFound("Resource not found", status=404, url=url)
        if not response.ok:
            logger.error(f"[{self.source_name}] HTTP {response.status_code} from {url}")
            raise NetworkError(
                response.reason or "Request failed", status=response.status_code, url=url
            )

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError("Response is not valid JSON", status=response.status_code, url=url) from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RemoteDataClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class BaseSource(ABC):
    """Abstract base class for the three feed sources.

    Holds the HTTP client and provides consistent payload validation and
    error logging across sources.
    """

    def __init__(self, source_name: str, client: RemoteDataClient):
        """Initialize the base source.

        Args:
            source_name: Name of the feed (e.g. "weather", "crypto")
            client: Client bound to the feed's base URL
        """
        self.source_name = source_name
        self.client = client

    def _validate(self, model: Type[ModelT], data: Any, context: str = "") -> ModelT:
        """Validate one upstream JSON object into ``model``.

        Raises:
            PayloadError: when required fields are missing or mistyped
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            self._handle_error(e, context or model.__name__)
            raise PayloadError(f"Unexpected {self.source_name} payload: {e.error_count()} error(s)") from e

    def _handle_error(self, error: Exception, context: str = "") -> None:
        """Log errors consistently across sources.

        Args:
            error: The exception that occurred
            context: Optional context about when the error occurred
        """
        context_str = f" ({context})" if context else ""
        logger.error(f"[{self.source_name}] Error{context_str}: {error}")

    def close(self) -> None:
        self.client.close()


def expect_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise PayloadError(f"Expected an object for {what}, got {type(data).__name__}")
    return data
