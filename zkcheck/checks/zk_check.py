from __future__ import annotations

import logging
import time
from typing import Callable, Mapping, Protocol, cast

from zkcheck.checks.flw import FourLetterWordTransport
from zkcheck.checks.quorum import NodeMode, evaluate_liveness, evaluate_roles
from zkcheck.checks.results import Attempt, Result
from zkcheck.models import DEFAULT_TIMEOUT_S, ZkCheck

logger = logging.getLogger(__name__)

NODE_ERROR = "one or more nodes reported errors"


class CheckerConfigError(ValueError):
    pass


class DiagnosticTransport(Protocol):
    def query(
        self, servers: list[str], timeout_s: float, detailed: bool
    ) -> Mapping[str, bool] | Mapping[str, NodeMode]: ...


def conclude_down(result: Result) -> bool:
    if any(a.error for a in result.attempts):
        result.down = True
        return True
    return False


def conclude_degraded(result: Result) -> bool:
    if result.threshold_rtt_ms <= 0:
        return False
    stats = result.compute_stats()
    if stats.median_ms > result.threshold_rtt_ms:
        result.notice = (
            f"median round trip time exceeded threshold ({result.threshold_rtt_ms:g}ms)"
        )
        result.degraded = True
        return True
    return False


def conclude_healthy(result: Result) -> bool:
    result.healthy = True
    return True


# First match wins.
CONCLUSION_RULES: tuple[Callable[[Result], bool], ...] = (
    conclude_down,
    conclude_degraded,
    conclude_healthy,
)


def conclude(result: Result, threshold_rtt_ms: float) -> Result:
    result.threshold_rtt_ms = threshold_rtt_ms
    for rule in CONCLUSION_RULES:
        if rule(result):
            break
    return result


class ZkChecker:
    def __init__(self, config: ZkCheck, transport: DiagnosticTransport | None = None) -> None:
        self.config = config
        self.transport = transport or FourLetterWordTransport()

    @property
    def attempts(self) -> int:
        return max(self.config.attempts or 1, 1)

    @property
    def timeout_s(self) -> float:
        return self.config.timeout_s or DEFAULT_TIMEOUT_S

    def check(self) -> Result:
        """
        Probe the ensemble and classify it. Only a configuration problem
        raises; unhealthy nodes are reported through the Result.
        """
        if not self.config.servers:
            raise CheckerConfigError(f"check {self.config.id!r} has no servers")

        result = Result(
            title=self.config.id,
            endpoint=",".join(self.config.servers),
        )
        result.attempts = self.run_attempts()
        conclude(result, self.config.threshold_rtt_ms or 0)

        if not result.healthy:
            logger.warning(
                "%s is %s: %s",
                result.title,
                result.status(),
                result.notice or NODE_ERROR,
            )
        return result

    def run_attempts(self) -> list[Attempt]:
        servers = list(self.config.servers)
        attempts: list[Attempt] = []
        for i in range(self.attempts):
            start = time.perf_counter()
            responses = self.transport.query(servers, self.timeout_s, self.config.detailed)
            if self.config.detailed:
                ok = evaluate_roles(cast(Mapping[str, NodeMode], responses))
            else:
                ok = evaluate_liveness(cast(Mapping[str, bool], responses))
            rtt_ms = (time.perf_counter() - start) * 1000

            if ok:
                attempts.append(Attempt(rtt_ms=rtt_ms))
            else:
                logger.debug(
                    "%s attempt %d failed: %s", self.config.id, i + 1, dict(responses)
                )
                attempts.append(Attempt(rtt_ms=rtt_ms, error=NODE_ERROR))
        return attempts
