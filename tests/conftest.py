"""
Root conftest.py for the lsp-binary test suite.

Pytest plugin that enforces TRA (Test Responsibility Architecture) and Tier markers.
- Every test declares the one responsibility it protects with @pytest.mark.tra
- Every test declares when it runs with @pytest.mark.tier
- Tier timeouts are applied when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.BinaryInstaller")
    def test_something():
        ...

Configuration:
    Set MARKER_ENFORCE=warn to report marker problems without failing collection
    Set MARKER_ENFORCE=0 to skip marker checks entirely
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = (
    "Domain.Invariant",
    "Domain.Policy",
    "UseCase",
    "Port",
    "Adapter",
    "Contract",
)

# Seconds; 0 means no limit
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}

TIER_NAMES: dict[int, str] = {
    0: "instant",
    1: "fast",
    2: "standard",
    3: "slow",
    4: "manual",
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and Tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor naming the single responsibility "
        "this test protects. Must start with one of: " + ", ".join(VALID_TRA_PREFIXES),
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier ("
        + ", ".join(f"{tier}={name}" for tier, name in TIER_NAMES.items())
        + ").",
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    marker = item.get_closest_marker("tier")
    if marker is None or not marker.args:
        return None
    tier = marker.args[0]
    if isinstance(tier, int) and tier in TIER_TIMEOUTS:
        return tier
    return None


def _check_item(item: Item) -> list[str]:
    """Return marker problems for a single test item."""
    problems = []
    test_id = item.nodeid

    tra_markers = list(item.iter_markers(name="tra"))
    if not tra_markers:
        problems.append(f"{test_id}: missing @pytest.mark.tra('...')")
    else:
        # Closest marker wins; class and function markers may both be present
        anchor = tra_markers[0].args[0] if tra_markers[0].args else None
        if not isinstance(anchor, str) or not anchor.strip():
            problems.append(f"{test_id}: @tra anchor must be a non-empty string")
        elif not anchor.startswith(VALID_TRA_PREFIXES):
            problems.append(
                f"{test_id}: invalid TRA anchor {anchor!r}, must start with one of: "
                + ", ".join(VALID_TRA_PREFIXES)
            )

    if item.get_closest_marker("tier") is None:
        problems.append(f"{test_id}: missing @pytest.mark.tier(n)")
    elif _get_tier(item) is None:
        problems.append(f"{test_id}: invalid tier value")

    return problems


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply a timeout marker per tier when pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or item.get_closest_marker("timeout") is not None:
            continue
        timeout = TIER_TIMEOUTS[tier]
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Enforce TRA and Tier markers at collection time."""
    enforce_mode = os.environ.get("MARKER_ENFORCE", "1")

    if enforce_mode != "0":
        problems = [problem for item in items for problem in _check_item(item)]
        if problems and enforce_mode == "warn":
            print("\nTRA/Tier marker warnings:")
            for problem in problems:
                print(f"  {problem}")
        elif problems:
            pytest.fail(
                "TRA/Tier marker errors:\n" + "\n".join(f"  - {p}" for p in problems),
                pytrace=False,
            )

    _apply_tier_timeouts(items)


def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA/Tier enforcement: {os.environ.get('MARKER_ENFORCE', '1')}"

