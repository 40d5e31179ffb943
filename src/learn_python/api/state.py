"""Immutable process state shared by all request handlers."""

import time
from dataclasses import dataclass, field

from fastapi import Request

from .config import Config
from .models import AppInfo, utc_now_rfc3339

APP_NAME = "learn-python"


@dataclass(frozen=True)
class AppState:
    """Application identity plus the process start instant.

    Built once in ``create_app`` and never mutated, so concurrent handlers
    read it without locking.
    """

    app_info: AppInfo
    started_at: float = field(default_factory=time.monotonic)

    @classmethod
    def create(cls, version: str, environment: str) -> "AppState":
        return cls(
            app_info=AppInfo(
                name=APP_NAME,
                version=version,
                environment=environment,
                timestamp=utc_now_rfc3339(),
            )
        )

    def uptime(self) -> float:
        """Seconds elapsed since the process started."""
        return max(time.monotonic() - self.started_at, 0.0)


def get_app_state(request: Request) -> AppState:
    """FastAPI dependency returning the state attached to the running app."""
    return request.app.state.app_state


def get_config(request: Request) -> Config:
    """FastAPI dependency returning the configuration the app was built with."""
    return request.app.state.config
