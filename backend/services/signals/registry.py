"""Lazy-loading registry of signal sources: created on first use, then cached."""

import logging

from services.signals.base import SignalSource

logger = logging.getLogger(__name__)

_registry: dict[str, SignalSource] = {}

SOURCE_NAMES = ("foundational", "recruiter_appeal", "market_context", "predictive_readiness")


def _create_source(name: str) -> SignalSource:
    """Factory: create a signal source by name with deferred imports."""
    if name == "foundational":
        from services.signals.foundational import FoundationalSource
        return FoundationalSource()
    elif name == "recruiter_appeal":
        from services.signals.recruiter_appeal import RecruiterAppealSource
        return RecruiterAppealSource()
    elif name == "market_context":
        from services.signals.market_context import MarketContextSource
        return MarketContextSource()
    elif name == "predictive_readiness":
        from services.signals.predictive import PredictiveSource
        return PredictiveSource()
    else:
        raise ValueError(f"Unknown signal source: {name}")


def get_source(name: str) -> SignalSource:
    """Get a signal source by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_source(name)
    source = _registry[name]
    source.ensure_loaded()
    return source


def preload(*names: str) -> None:
    """Pre-load sources (e.g. at startup). Defaults to all of them."""
    for name in names or SOURCE_NAMES:
        get_source(name)


def clear() -> None:
    """Drop all cached sources. Useful for testing."""
    _registry.clear()
