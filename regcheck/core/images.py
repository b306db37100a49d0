"""Best-effort reachability check for descriptor images."""

import httpx

from regcheck.logging import get_logger
from regcheck.models.result import ImageWarning


async def check_image(
    client: httpx.AsyncClient,
    username: str,
    image_url: str,
) -> ImageWarning | None:
    """
    Request the image and report a warning instead of raising.

    Only the status line is inspected; the body is never downloaded.

    Returns:
        None when the image answered 200, otherwise an ImageWarning
    """
    log = get_logger("images")
    try:
        async with client.stream("GET", image_url) as response:
            status_code = response.status_code
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        warning = ImageWarning(username=username, image_url=image_url, reason=repr(e))
    else:
        if status_code == 200:
            return None
        warning = ImageWarning(
            username=username,
            image_url=image_url,
            reason=f"HTTP status code: {status_code}",
            status_code=status_code,
        )

    log.warning(
        "image_unreachable",
        username=username,
        image_url=image_url,
        reason=warning.reason,
    )
    return warning
