"""Pydantic request/response models for Learn-Python API."""

from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def utc_now_rfc3339() -> str:
    """Current UTC time as an RFC 3339 string with offset."""
    return datetime.now(timezone.utc).isoformat()


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope returned by every JSON route.

    Exactly one of ``data`` / ``error`` is set. Routes serialize the envelope
    with ``response_model_exclude_none=True`` so the unset one is omitted.
    """

    success: bool = Field(..., description="Whether the request succeeded")
    data: Optional[T] = Field(None, description="Payload on success")
    error: Optional[str] = Field(None, description="Error message on failure")
    timestamp: str = Field(default_factory=utc_now_rfc3339, description="RFC 3339 timestamp")

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        """Wrap a payload in a success envelope."""
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "ApiResponse[T]":
        """Build an error envelope carrying ``message``."""
        return cls(success=False, error=message)

    def to_content(self) -> dict:
        """JSON-ready dict with the unset half of the envelope dropped."""
        return self.model_dump(mode="json", exclude_none=True)


class AppInfo(BaseModel):
    """Application identity established at startup."""

    name: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    timestamp: str = Field(..., description="Process start time (RFC 3339)")


class Documentation(BaseModel):
    swagger: Optional[str] = Field(None, description="Swagger UI URL")
    postman: Optional[str] = Field(None, description="Postman collection URL")


class Links(BaseModel):
    repository: str
    issues: str


class Endpoint(BaseModel):
    """A single documented route."""

    path: str
    method: str
    description: str


class WelcomeData(BaseModel):
    """Welcome page payload."""

    message: str
    description: str
    documentation: Documentation
    links: Links
    endpoints: List[Endpoint] = Field(default_factory=list)


class MemoryInfo(BaseModel):
    """Host memory in bytes; ``used`` is always ``total - available``."""

    total: int = Field(..., description="Total physical memory")
    available: int = Field(..., description="Memory available to new processes")
    used: int = Field(..., description="total - available")
    percent: float = Field(..., description="used / total as a percentage")


class SystemInfo(BaseModel):
    os: str
    arch: str
    cpu_count: int
    hostname: str


class HealthData(BaseModel):
    """Health check payload."""

    status: str = Field(..., description="Service health status")
    uptime: float = Field(..., description="Seconds since process start")
    memory: MemoryInfo
    system: SystemInfo


class DetailedSystemInfo(BaseModel):
    os: str
    arch: str
    hostname: str
    cpu_count: int
    uptime: float
    memory: MemoryInfo


class EnvironmentInfo(BaseModel):
    python_version: str = Field(..., description="Interpreter version")
    port: str = Field(..., description="Configured port")
    host: str = Field(..., description="Configured host")


class InfoData(BaseModel):
    """Application and system information payload."""

    status: str = Field(..., description="Service health status")
    application: AppInfo
    system: DetailedSystemInfo
    environment: EnvironmentInfo


class VersionData(BaseModel):
    """Version and build metadata."""

    version: str
    build_date: str
    commit: str


class EchoRequest(BaseModel):
    message: str = Field(..., description="Text to echo back")


class EchoResponse(BaseModel):
    message: str
    received_at: str = Field(..., description="Time the request was handled (RFC 3339)")
