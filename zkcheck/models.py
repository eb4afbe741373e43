from __future__ import annotations

from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from zkcheck.checks.flw import split_endpoint

DEFAULT_TIMEOUT_S = 1.0


def default_timeout(v: float) -> float:
    return DEFAULT_TIMEOUT_S if v <= 0 else v


def clamp_attempts(v: int) -> int:
    return max(v, 1)


TimeoutSeconds = Annotated[float, AfterValidator(default_timeout)]
AttemptCount = Annotated[int, AfterValidator(clamp_attempts)]


class Defaults(BaseModel):
    timeout_s: TimeoutSeconds = DEFAULT_TIMEOUT_S
    attempts: AttemptCount = 1
    threshold_rtt_ms: float = Field(default=0, ge=0)


class ZkCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    type: Literal["zk"] = "zk"
    servers: List[str] = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    timeout_s: Optional[TimeoutSeconds] = None
    attempts: Optional[AttemptCount] = None
    detailed: bool = False
    threshold_rtt_ms: Optional[float] = Field(default=None, ge=0)

    @field_validator("servers")
    @classmethod
    def _check_servers(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("servers must be unique")
        for server in v:
            host, port = split_endpoint(server)
            if not host:
                raise ValueError(f"invalid server address: {server!r}")
            if not 1 <= port <= 65535:
                raise ValueError(f"port out of range: {server!r}")
        return v


class Registry(BaseModel):
    defaults: Defaults = Defaults()
    checks: List[ZkCheck]
