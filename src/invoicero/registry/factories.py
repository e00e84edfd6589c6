"""Registry factory functions for creating resolver instances."""

import os
from typing import Optional

from invoicero.registry.ares import DEFAULT_ARES_URL, DEFAULT_TIMEOUT, AresResolver


def create_ares_resolver(
    base_url: Optional[str] = None, timeout: Optional[float] = None
) -> AresResolver:
    """Create an ARES resolver.

    Args:
        base_url: ARES REST base URL. If None, checks INVOICERO_ARES_URL
            environment variable, then defaults to the public ARES endpoint
        timeout: Request timeout in seconds. If None, checks
            INVOICERO_ARES_TIMEOUT environment variable, then defaults to 10

    Returns:
        AresResolver instance

    Raises:
        ValueError: If INVOICERO_ARES_TIMEOUT is not a number
    """
    if base_url is None:
        base_url = os.environ.get("INVOICERO_ARES_URL", DEFAULT_ARES_URL)

    if timeout is None:
        timeout_str = os.environ.get("INVOICERO_ARES_TIMEOUT")
        if timeout_str is None:
            timeout = DEFAULT_TIMEOUT
        else:
            try:
                timeout = float(timeout_str)
            except ValueError:
                raise ValueError(f"INVOICERO_ARES_TIMEOUT must be a number, got '{timeout_str}'")

    return AresResolver(base_url=base_url, timeout=timeout)
