"""
GitHub Gist API client.

Creates gists from a validated GistRequest using HTTP basic auth with the
GitHub username and password (in practice a personal access token with the
'gist' scope).
"""

from __future__ import annotations

import httpx

from docgist.exceptions import GistCreateError
from docgist.models import Credentials, GistRequest, GistResult


class GistClient:
    """
    GitHub Gist API client.

    Only gist creation is supported; every call opens its own AsyncClient
    unless one is injected (tests pass a client backed by httpx.MockTransport).
    """

    # GitHub API limit per gist file
    MAX_FILE_SIZE_MB = 100

    def __init__(
        self,
        base_url: str = 'https://api.github.com',
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Gist client.

        Args:
            base_url: GitHub API root (GitHub Enterprise installs use their own)
            timeout: Request timeout in seconds
            client: Optional shared AsyncClient
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._client = client

    async def create(self, request: GistRequest, credentials: Credentials) -> GistResult:
        """
        Create a new gist.

        Args:
            request: Files, visibility and description of the gist
            credentials: GitHub username and password/token

        Returns:
            GistResult with the web URL (None if GitHub did not return one)

        Raises:
            GistCreateError: If a file is too large, the request fails or GitHub rejects it
        """
        for name, content in request.files.items():
            size_mb = len(content.encode('utf-8')) / (1024 * 1024)
            if size_mb > self.MAX_FILE_SIZE_MB:
                raise GistCreateError(
                    f"File '{name}' is too large for a gist: {size_mb:.2f}MB "
                    f'(limit {self.MAX_FILE_SIZE_MB}MB).'
                )

        auth = httpx.BasicAuth(credentials.username, credentials.password.get_secret_value())
        try:
            if self._client is not None:
                response = await self._post(self._client, request, auth)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client, request, auth)
        except httpx.TimeoutException:
            raise GistCreateError(f'GitHub did not respond within {self.timeout:g}s.')
        except httpx.HTTPError as e:
            raise GistCreateError(f'Could not reach GitHub: {e}') from e

        if response.is_error:
            raise GistCreateError(self._error_message(response), status_code=response.status_code)

        try:
            gist_data = response.json()
        except ValueError:
            return GistResult()
        if not isinstance(gist_data, dict):
            return GistResult()
        return GistResult.from_response(gist_data)

    async def _post(self, client: httpx.AsyncClient, request: GistRequest, auth: httpx.BasicAuth) -> httpx.Response:
        return await client.post(
            f'{self.base_url}/gists',
            auth=auth,
            headers={
                'Accept': 'application/vnd.github.v3+json',
                'X-GitHub-Api-Version': '2022-11-28',
            },
            json=request.to_payload(),
            timeout=self.timeout,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer GitHub's own 'message' field over the bare reason phrase."""
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and isinstance(data.get('message'), str) and data['message']:
            return data['message']
        return response.reason_phrase or 'Unknown error'
