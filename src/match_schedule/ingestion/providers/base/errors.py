from __future__ import annotations


class ProviderError(RuntimeError):
    """A league's schedule could not be obtained from the upstream source."""


class ProviderRequestError(ProviderError):
    """Transport failures: timeouts, connection errors, non-2xx, bodies that are not JSON."""


class ProviderRateLimited(ProviderRequestError):
    """The schedule source refused the season query with HTTP 429."""


class ProviderResponseError(ProviderError):
    """The schedule source answered, but `events` was neither a list nor null."""
