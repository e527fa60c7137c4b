"""Resolve "latest" placeholders to concrete versions from the npm registry.

Lookups run concurrently, one task per package, each bounded by its own
timeout. A failed or timed-out lookup keeps the placeholder version for its
package; resolution as a whole never fails.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from hapi_generator.core.config import (
    LOOKUP_TIMEOUT_MS,
    PLACEHOLDER_VERSION,
    REGISTRY_URL,
)
from hapi_generator.helpers.helpers_logging import print_warning

MANIFEST_INDENT = "    "


class DependencyLookupError(Exception):
    """A single registry lookup failed, timed out or returned incomplete data."""

    def __init__(self, package_name: str, reason: str) -> None:
        super().__init__(f"{package_name}: {reason}")
        self.package_name = package_name
        self.reason = reason


@dataclass(frozen=True)
class LookupOutcome:
    """Settled result of one lookup: a version or the error that prevented it."""

    name: str
    version: str | None = None
    error: BaseException | None = None


def registry_latest_url(registry_url: str, package_name: str) -> str:
    """Return the "latest" document URL for a package.

    Scoped names keep their ``@`` and get the ``/`` percent-encoded, which is
    what the npm registry expects (``@hapi/joi`` -> ``@hapi%2Fjoi``).
    """
    return f"{registry_url.rstrip('/')}/{quote(package_name, safe='@')}/latest"


async def fetch_latest(
    client: httpx.AsyncClient,
    package_name: str,
    registry_url: str = REGISTRY_URL,
) -> str:
    """Query the registry for the latest version of ``package_name``.

    Raises:
        DependencyLookupError: If the response is not a usable
            ``{name, version}`` document for the requested package
        httpx.HTTPError: On transport failures
    """
    response = await client.get(registry_latest_url(registry_url, package_name))
    if response.status_code != httpx.codes.OK:
        raise DependencyLookupError(package_name, f"HTTP {response.status_code}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise DependencyLookupError(package_name, "response is not JSON") from exc

    if not isinstance(payload, dict):
        raise DependencyLookupError(package_name, "unexpected response body")
    name = payload.get("name")
    version = payload.get("version")
    if not name or not version:
        raise DependencyLookupError(package_name, "response has no name/version")
    if name != package_name:
        raise DependencyLookupError(package_name, f"registry answered for '{name}'")
    return str(version)


async def _lookup(
    client: httpx.AsyncClient,
    package_name: str,
    registry_url: str,
    timeout_s: float,
) -> str:
    try:
        return await asyncio.wait_for(
            fetch_latest(client, package_name, registry_url),
            timeout=timeout_s,
        )
    except asyncio.TimeoutError as exc:
        raise DependencyLookupError(
            package_name, f"timed out after {int(timeout_s * 1000)}ms"
        ) from exc
    except httpx.HTTPError as exc:
        raise DependencyLookupError(package_name, str(exc) or type(exc).__name__) from exc


async def resolve_versions_async(
    package_names: Iterable[str],
    *,
    client: httpx.AsyncClient | None = None,
    registry_url: str = REGISTRY_URL,
    timeout_ms: int = LOOKUP_TIMEOUT_MS,
) -> dict[str, str]:
    """Resolve the latest version of every package concurrently.

    Args:
        package_names: Selected package names (duplicates are collapsed)
        client: HTTP client to use; a short-lived one is created if omitted
        registry_url: Base URL of the npm registry
        timeout_ms: Per-lookup timeout in milliseconds

    Returns:
        Mapping with one entry per requested name, in request order. Entries
        whose lookup failed keep the placeholder version.
    """
    resolved = {name: PLACEHOLDER_VERSION for name in package_names}
    if not resolved:
        return resolved

    timeout_s = timeout_ms / 1000
    if client is None:
        async with httpx.AsyncClient(timeout=timeout_s) as own_client:
            outcomes = await _gather_lookups(own_client, resolved, registry_url, timeout_s)
    else:
        outcomes = await _gather_lookups(client, resolved, registry_url, timeout_s)

    for outcome in outcomes:
        if outcome.version is not None:
            resolved[outcome.name] = outcome.version
        else:
            print_warning(
                f"Could not resolve {outcome.name}, keeping "
                + f"'{PLACEHOLDER_VERSION}' ({outcome.error})"
            )
    return resolved


async def _gather_lookups(
    client: httpx.AsyncClient,
    names: Iterable[str],
    registry_url: str,
    timeout_s: float,
) -> list[LookupOutcome]:
    ordered = list(names)
    results = await asyncio.gather(
        *[_lookup(client, name, registry_url, timeout_s) for name in ordered],
        return_exceptions=True,
    )
    outcomes: list[LookupOutcome] = []
    for name, result in zip(ordered, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            outcomes.append(LookupOutcome(name, error=result))
        else:
            outcomes.append(LookupOutcome(name, version=result))
    return outcomes


def resolve_versions(
    package_names: Iterable[str],
    *,
    registry_url: str = REGISTRY_URL,
    timeout_ms: int = LOOKUP_TIMEOUT_MS,
) -> dict[str, str]:
    """Synchronous wrapper around :func:`resolve_versions_async`."""
    names = list(dict.fromkeys(package_names))
    if not names:
        return {}
    return asyncio.run(
        resolve_versions_async(names, registry_url=registry_url, timeout_ms=timeout_ms)
    )


def render_manifest_fragment(resolved: Mapping[str, str]) -> str:
    """Render resolved versions as ``"name": "version"`` pairs for package.json.

    Entries keep the mapping's order and are joined by a comma; entries after
    the first start on a new, indented line. There is no trailing comma.
    Names and versions are quoted as JSON strings.

    Example:
        >>> render_manifest_fragment({"joi": "17.2.0"})
        '"joi": "17.2.0"'
    """
    return f",\n{MANIFEST_INDENT}".join(
        f"{json.dumps(name)}: {json.dumps(version)}" for name, version in resolved.items()
    )
