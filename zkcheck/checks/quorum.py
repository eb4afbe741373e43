from __future__ import annotations

from enum import Enum
from typing import Mapping


class NodeMode(Enum):
    FOLLOWER = "follower"
    LEADER = "leader"
    STANDALONE = "standalone"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "NodeMode":
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


def evaluate_liveness(responses: Mapping[str, bool]) -> bool:
    """
    Every node must answer "imok". An empty response set counts as ok
    (the AND-reduction identity); config validation guarantees at least
    one server, so the transport never hands us an empty mapping.
    """
    return all(responses.values())


def evaluate_roles(responses: Mapping[str, NodeMode]) -> bool:
    """
    A healthy quorum has exactly one leader and every other node a
    follower. A standalone node is only acceptable as the sole member.
    """
    total = len(responses)
    leaders = 0
    followers = 0
    ok = True
    standalone = False

    for mode in responses.values():
        if mode is NodeMode.FOLLOWER:
            followers += 1
        elif mode is NodeMode.LEADER:
            leaders += 1
        elif mode is NodeMode.STANDALONE:
            standalone = True
            ok = ok and total == 1
        else:
            ok = False

    if not standalone:
        ok = ok and leaders == 1 and leaders + followers == total

    return ok
