from __future__ import annotations

import logging
import time

from zkcheck.checks.results import Result
from zkcheck.checks.zk_check import ZkChecker
from zkcheck.config import settings
from zkcheck.notifier import Notifier, build_notifier
from zkcheck.registry import apply_defaults, load_registry

logger = logging.getLogger(__name__)


def build_checkers(path: str | None = None) -> list[ZkChecker]:
    reg = load_registry(path or settings.ZKCHECK_CHECKS_PATH)
    return [ZkChecker(c) for c in apply_defaults(reg)]


def run_once(checkers: list[ZkChecker], notifier: Notifier | None = None) -> list[Result]:
    results: list[Result] = []
    for checker in checkers:
        res = checker.check()
        logger.info(
            "%s %s (median %.3fms)",
            res.title,
            res.status(),
            res.compute_stats().median_ms,
        )
        results.append(res)

    if notifier is not None:
        notifier.notify(results)
    return results


def loop_forever(interval_s: int) -> None:
    checkers = build_checkers()
    notifier = build_notifier(settings)
    if notifier is None:
        logger.warning("No notification channel configured; alerts are disabled")

    while True:
        start = time.perf_counter()
        try:
            run_once(checkers, notifier=notifier)
        except Exception:
            # Delivery errors should never stop the check loop.
            logger.exception("Check cycle failed")
        elapsed = time.perf_counter() - start
        sleep_s = max(0.0, interval_s - elapsed)
        time.sleep(sleep_s)
