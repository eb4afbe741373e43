from __future__ import annotations

from zkcheck.checks.results import Result

SUBJECT_PREFIX = "[zkcheck]"


def format_alert(result: Result) -> tuple[str, str]:
    subject = f"{SUBJECT_PREFIX} {result.title} {result.status()}"
    return subject, str(result)
