"""Authentication module for loading document store credentials.

This module handles loading the document store endpoint and API token from
environment variables using python-dotenv. It validates that all required
credentials are present and raises InvalidCredentialsError otherwise.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """Document store API credentials."""
    url: str
    api_token: str


class Authenticator:
    """Loads and validates document store credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Required environment variables:
        PASSAGE_STORE_URL: Base URL of the document store API
        PASSAGE_STORE_TOKEN: API token sent as a Bearer token

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    URL_VAR = 'PASSAGE_STORE_URL'
    TOKEN_VAR = 'PASSAGE_STORE_TOKEN'

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get document store credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url and api_token

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        url = os.getenv(self.URL_VAR)
        api_token = os.getenv(self.TOKEN_VAR)

        missing = []
        if not url:
            missing.append(self.URL_VAR)
        if not api_token:
            missing.append(self.TOKEN_VAR)

        if missing:
            raise InvalidCredentialsError(
                endpoint=url if url else "unknown",
                reason=f"missing environment variable(s): {', '.join(missing)}"
            )

        return Credentials(url=url.rstrip('/'), api_token=api_token)  # type: ignore[union-attr]
