import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    ZKCHECK_CHECKS_PATH: str = os.getenv(
        "ZKCHECK_CHECKS_PATH",
        str(Path(__file__).resolve().parents[1] / "checks.yml"),
    )
    MONITOR_INTERVAL: int = int(os.getenv("MONITOR_INTERVAL", 60))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SNS_TOPIC_ARN: str = os.getenv("SNS_TOPIC_ARN")
    AWS_REGION: str = os.getenv("AWS_REGION")
    SNS_ACCESS_KEY_ID: str = os.getenv("SNS_ACCESS_KEY_ID")
    SNS_SECRET_ACCESS_KEY: str = os.getenv("SNS_SECRET_ACCESS_KEY")
    NTFY_URL: str = os.getenv("NTFY_URL")
    NTFY_TOPIC: str = os.getenv("NTFY_TOPIC")


settings = Settings()
