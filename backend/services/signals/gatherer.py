"""Concurrent signal gathering.

Each source runs in a worker thread under a timeout. Every source yields
exactly one SignalResult tagged "ok" or "unavailable"; the results are
merged into a SignalBundle keyed by group name, so a slow or failing
source lowers confidence instead of blocking the scan.
"""

import asyncio
import logging
from typing import Any, Mapping

from config import settings
from models.schemas.scan_context import ScanContext
from models.schemas.signals import SignalBundle, SignalResult
from services.errors import SignalUnavailableError
from services.score_engine import coerce_group
from services.signals.registry import SOURCE_NAMES, get_source
from services.signals.skills_relevancy import build_skills_relevancy

logger = logging.getLogger(__name__)


async def _run_source(name: str, context: ScanContext, timeout: float) -> SignalResult:
    try:
        source = get_source(name)
        value = await asyncio.wait_for(asyncio.to_thread(source.produce, context), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Signal source %s timed out after %.1fs", name, timeout)
        return SignalResult(group=name, status="unavailable", error="timeout")
    except SignalUnavailableError as e:
        logger.info("Signal source %s unavailable: %s", name, e)
        return SignalResult(group=name, status="unavailable", error=str(e))
    except Exception as e:
        logger.error("Signal source %s failed: %s", name, e)
        return SignalResult(group=name, status="unavailable", error=str(e))
    return SignalResult(group=name, status="ok", value=value)


def _override_result(name: str, value: Any) -> SignalResult:
    """Caller-supplied group. None marks it unavailable; bad shapes raise."""
    group = coerce_group(name, value)
    if group is None:
        return SignalResult(group=name, status="unavailable", error="not supplied")
    return SignalResult(group=name, status="ok", value=group)


async def gather_signals(
    context: ScanContext,
    overrides: Mapping[str, Any] | None = None,
    timeout: float | None = None,
) -> dict[str, SignalResult]:
    """Produce every signal group for one scan.

    Groups present in `overrides` are taken as given (validated, not
    computed). Raises MalformedSignalError if an override has the wrong shape.
    """
    overrides = overrides or {}
    timeout = settings.signal_timeout_seconds if timeout is None else timeout

    results: dict[str, SignalResult] = {
        name: _override_result(name, value) for name, value in overrides.items()
    }

    if "skills_relevancy" not in results:
        if context.job_text.strip():
            results["skills_relevancy"] = SignalResult(
                group="skills_relevancy", value=build_skills_relevancy(context)
            )
        else:
            results["skills_relevancy"] = SignalResult(
                group="skills_relevancy", status="unavailable", error="no job description"
            )

    pending = [name for name in SOURCE_NAMES if name not in results]
    produced = await asyncio.gather(*(_run_source(name, context, timeout) for name in pending))
    results.update({r.group: r for r in produced})
    return results


def merge_results(results: Mapping[str, SignalResult]) -> SignalBundle:
    """Deterministic union of the ok results, keyed by group."""
    return SignalBundle(**{
        name: result.value
        for name, result in sorted(results.items())
        if result.ok
    })
