"""HTTP fetcher for users' page.json descriptors."""

import asyncio
from dataclasses import dataclass

import httpx

from regcheck.config import DEFAULT_DESCRIPTOR_URL
from regcheck.exceptions import FetchError
from regcheck.logging import get_logger


@dataclass
class FetchResult:
    """Raw descriptor as served."""

    url: str
    body: bytes
    status_code: int


def descriptor_url(github_username: str, template: str = DEFAULT_DESCRIPTOR_URL) -> str:
    """Build the well-known page.json URL for a GitHub user."""
    return template.format(github_username=github_username)


async def fetch_descriptor(
    client: httpx.AsyncClient,
    username: str,
    github_username: str,
    template: str = DEFAULT_DESCRIPTOR_URL,
    max_retries: int = 0,
    backoff_seconds: float = 0.5,
) -> FetchResult:
    """
    Fetch a user's descriptor.

    Only transport failures are retried. Any HTTP response other than 200,
    redirect loops and undecodable bodies are final.

    Args:
        client: Shared async client
        username: Registry key, used in error messages
        github_username: Owner of the my-links repository
        template: URL template with a {github_username} placeholder
        max_retries: Extra attempts after a transport failure
        backoff_seconds: Initial delay between attempts, doubled each time

    Returns:
        FetchResult with the raw response body

    Raises:
        FetchError: On a non-200 status, any other httpx failure, or when all attempts fail
    """
    log = get_logger("fetcher")
    url = descriptor_url(github_username, template)
    log.info("descriptor_fetch", username=username, url=url)

    attempt = 0
    while True:
        try:
            response = await client.get(url)
            break
        except httpx.TransportError as e:
            if attempt >= max_retries:
                raise FetchError(
                    username,
                    None,
                    f'Failed to fetch page.json for user "{username}": {e!r}',
                ) from e
            delay = backoff_seconds * (2 ** attempt)
            attempt += 1
            log.warning("descriptor_retry", username=username, attempt=attempt, error=repr(e))
            if delay > 0:
                await asyncio.sleep(delay)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(
                username,
                None,
                f'Failed to fetch page.json for user "{username}": {e!r}',
            ) from e

    if response.status_code != 200:
        raise FetchError(username, response.status_code)

    return FetchResult(url=url, body=response.content, status_code=response.status_code)
