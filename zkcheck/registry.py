from __future__ import annotations

from pathlib import Path

import yaml

from zkcheck.models import Registry, ZkCheck


def load_registry(path: Path | str) -> Registry:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing checks.yml at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    reg = Registry.model_validate(data)

    # Ensure unique IDs
    seen = set()
    for c in reg.checks:
        if c.id in seen:
            raise ValueError(f"Duplicate check id: {c.id}")
        seen.add(c.id)

    return reg


def apply_defaults(reg: Registry) -> list[ZkCheck]:
    """
    Fill unset per-check fields from the registry defaults.
    """
    d = reg.defaults
    out: list[ZkCheck] = []
    for c in reg.checks:
        out.append(
            c.model_copy(
                update={
                    "timeout_s": c.timeout_s or d.timeout_s,
                    "attempts": max(c.attempts or d.attempts, 1),
                    "threshold_rtt_ms": (
                        d.threshold_rtt_ms if c.threshold_rtt_ms is None else c.threshold_rtt_ms
                    ),
                }
            )
        )
    return out
