from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Protocol

import boto3
import requests

from zkcheck.checks.results import Result
from zkcheck.formatting import format_alert

logger = logging.getLogger(__name__)

# SNS rejects subjects longer than this.
SNS_SUBJECT_MAX = 100


class Publisher(Protocol):
    def publish(self, subject: str, body: str) -> None: ...


class SnsPublisher:
    def __init__(
        self,
        topic_arn: str,
        region: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self.topic_arn = topic_arn
        self.region = region
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            kwargs: dict[str, str] = {}
            if self.region:
                kwargs["region_name"] = self.region
            # Static keys only when both halves are present, otherwise
            # boto3 falls back to its usual credential chain.
            if self.access_key_id and self.secret_access_key:
                kwargs["aws_access_key_id"] = self.access_key_id
                kwargs["aws_secret_access_key"] = self.secret_access_key
            self._client = boto3.client("sns", **kwargs)
        return self._client

    def publish(self, subject: str, body: str) -> None:
        self.client.publish(
            TopicArn=self.topic_arn,
            Subject=subject[:SNS_SUBJECT_MAX],
            Message=body,
        )


@dataclass
class NtfyConfig:
    base_url: str
    topic: str
    priority: int = 4
    tags: str = "rotating_light,zookeeper"
    timeout_s: float = 5


class NtfyPublisher:
    def __init__(self, cfg: NtfyConfig) -> None:
        self.cfg = cfg

    def publish(self, subject: str, body: str) -> None:
        url = f"{self.cfg.base_url.rstrip('/')}/{self.cfg.topic}"
        headers = {
            "Title": subject,
            "Priority": str(self.cfg.priority),
            "Tags": self.cfg.tags,
        }
        resp = requests.post(
            url, data=body.encode("utf-8"), headers=headers, timeout=self.cfg.timeout_s
        )
        resp.raise_for_status()


class Notifier:
    def __init__(self, publisher: Publisher) -> None:
        self.publisher = publisher

    def notify(self, results: Iterable[Result]) -> None:
        """
        Publish one alert per unhealthy result. The first delivery failure
        propagates and the remaining alerts are not sent.
        """
        for result in results:
            if result.healthy:
                continue
            subject, body = format_alert(result)
            self.publisher.publish(subject, body)
            logger.info("Published alert: %s", subject)


def build_notifier(settings: Any) -> Notifier | None:
    if settings.SNS_TOPIC_ARN:
        return Notifier(
            SnsPublisher(
                topic_arn=settings.SNS_TOPIC_ARN,
                region=settings.AWS_REGION,
                access_key_id=settings.SNS_ACCESS_KEY_ID,
                secret_access_key=settings.SNS_SECRET_ACCESS_KEY,
            )
        )
    if settings.NTFY_URL and settings.NTFY_TOPIC:
        return Notifier(NtfyPublisher(NtfyConfig(base_url=settings.NTFY_URL, topic=settings.NTFY_TOPIC)))
    return None
