"""REST client for the remote passage document store.

This module wraps a JSON REST API with the requests library and provides
error translation from HTTP failures to our typed exception hierarchy.
It integrates with the retry logic for handling rate limits.

Endpoints (relative to the configured base URL):
    GET   /collections/{collection}/documents?{field}={value}
    POST  /collections/{collection}/documents
    PATCH /collections/{collection}/documents/{id}
"""

import logging
import re
import threading
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.exceptions import ConnectionError, HTTPError, Timeout

from .auth import Authenticator, Credentials
from .errors import (
    APIAccessError,
    APIUnreachableError,
    DocumentNotFoundError,
    InvalidCredentialsError,
)
from .retry_logic import retry_on_rate_limit

logger = logging.getLogger(__name__)

# Seconds before an individual request is abandoned
REQUEST_TIMEOUT = 30


class DocumentStoreClient:
    """Client for one collection of the remote document store.

    This class provides a thin wrapper over the store's REST API that:
    1. Handles authentication using the Authenticator
    2. Translates HTTP errors to typed exceptions
    3. Integrates retry logic for 429 rate limits

    A single requests.Session is shared between threads; the sync dispatcher
    issues calls from a bounded worker pool.

    Example:
        >>> client = DocumentStoreClient(Authenticator(), collection="passages")
        >>> client.find_by_field("permalink", "hello-world")
        [{'id': '42', 'permalink': 'hello-world', ...}]
    """

    def __init__(
        self,
        authenticator: Authenticator,
        collection: str,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            authenticator: Authenticator instance for loading credentials
            collection: Name of the collection holding passages
            session: Optional pre-configured requests session
        """
        if not collection or not collection.strip():
            raise ValueError("collection cannot be empty")

        self._authenticator = authenticator
        self.collection = collection.strip()
        self._session = session
        self._credentials: Optional[Credentials] = None
        self._connect_lock = threading.Lock()

    def _connect(self) -> Tuple[requests.Session, Credentials]:
        """Get or lazily create the authenticated HTTP session.

        The first call may come from several pool threads at once. Headers
        are set before the credentials become visible to other threads.

        Raises:
            InvalidCredentialsError: If credentials are missing
        """
        with self._connect_lock:
            if self._session is None:
                self._session = requests.Session()
            if self._credentials is None:
                credentials = self._authenticator.get_credentials()
                self._session.headers.update({
                    'Authorization': f'Bearer {credentials.api_token}',
                    'Accept': 'application/json',
                })
                self._credentials = credentials
            return self._session, self._credentials

    def _get_session(self) -> requests.Session:
        return self._connect()[0]

    def _documents_url(self, record_id: Optional[str] = None) -> str:
        _, credentials = self._connect()
        url = f"{credentials.url}/collections/{self.collection}/documents"
        if record_id is not None:
            url += f"/{record_id}"
        return url

    @staticmethod
    def _sanitize(text: str) -> str:
        """Mask tokens so that error messages can be logged safely."""
        if not text:
            return text
        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'(api_?token|token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        return re.sub(r'://([\w.-]+):([\w.-]+)@', r'://***:***@', sanitized)

    def _translate_error(
        self,
        exception: Exception,
        operation: str,
        record_id: Optional[str] = None,
    ) -> Exception:
        """Translate requests exceptions to typed document store exceptions.

        Args:
            exception: The original exception from requests
            operation: Description of the operation that failed (for logging)
            record_id: Record addressed by the operation, if any

        Returns:
            Exception: Translated exception (one of our typed exceptions)
        """
        endpoint = self._credentials.url if self._credentials else "unknown"

        if isinstance(exception, (Timeout, ConnectionError)):
            return APIUnreachableError(endpoint=endpoint)

        status_code = None
        response = getattr(exception, 'response', None)
        if response is not None:
            status_code = getattr(response, 'status_code', None)

        if status_code in (401, 403):
            return InvalidCredentialsError(endpoint=endpoint, reason=f"HTTP {status_code}")

        if status_code == 404 and record_id is not None:
            return DocumentNotFoundError(self.collection, record_id)

        safe_error_msg = self._sanitize(str(exception))
        logger.error(f"Document store operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"Document store failure during {operation}")

    def _request(
        self,
        method: str,
        url: str,
        operation: str,
        record_id: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request with rate-limit retries and error translation."""
        session = self._get_session()

        def _send():
            response = session.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
            # 429 is raised untranslated so the retry loop can see it
            response.raise_for_status()
            if not response.content:
                return None
            return response.json()

        try:
            return retry_on_rate_limit(_send)
        except (HTTPError, Timeout, ConnectionError) as e:
            raise self._translate_error(e, operation, record_id) from e
        except ValueError as e:
            raise APIAccessError(f"Invalid JSON returned during {operation}") from e

    def find_by_field(self, field: str, value: Any) -> List[Dict[str, Any]]:
        """Return every record of the collection whose ``field`` equals ``value``.

        Args:
            field: Field name to filter on (e.g. "permalink")
            value: Value the field must equal

        Returns:
            List of matching records (possibly empty)

        Raises:
            InvalidCredentialsError: If credentials are invalid
            APIUnreachableError: If the store is unreachable
            APIAccessError: If the request fails for any other reason
        """
        payload = self._request(
            'GET',
            self._documents_url(),
            f"find_by_field({field}={value})",
            params={field: value},
        )
        if payload is None:
            return []
        # Some stores wrap results: {"results": [...]}
        if isinstance(payload, dict):
            payload = payload.get('results', [])
        if not isinstance(payload, list):
            raise APIAccessError(
                f"Unexpected response type {type(payload).__name__} from find_by_field"
            )
        return payload

    def add(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new record into the collection.

        Args:
            document: Field mapping to store

        Returns:
            The created record as returned by the store

        Raises:
            InvalidCredentialsError: If credentials are invalid
            APIUnreachableError: If the store is unreachable
            APIAccessError: If the request fails for any other reason
        """
        created = self._request(
            'POST',
            self._documents_url(),
            f"add({document.get('permalink', '?')})",
            json=document,
        )
        return created or {}

    def update_by_id(self, record_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Update an existing record in place.

        Args:
            record_id: Identifier of the record to update
            document: Fields to overwrite

        Returns:
            The updated record as returned by the store

        Raises:
            DocumentNotFoundError: If the record does not exist
            InvalidCredentialsError: If credentials are invalid
            APIUnreachableError: If the store is unreachable
            APIAccessError: If the request fails for any other reason
        """
        if not record_id or not str(record_id).strip():
            raise ValueError("record_id cannot be empty")

        updated = self._request(
            'PATCH',
            self._documents_url(str(record_id)),
            f"update_by_id({record_id})",
            record_id=str(record_id),
            json=document,
        )
        return updated or {}
