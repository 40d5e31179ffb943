"""Host memory and system snapshot, queried fresh on every call."""

import platform
import socket
import sys

import psutil

from .models import MemoryInfo, SystemInfo


def memory_snapshot() -> MemoryInfo:
    """Current physical memory usage.

    ``used`` is derived as ``total - available`` rather than taken from
    psutil, whose own ``used`` figure excludes buffers and cache.
    """
    memory = psutil.virtual_memory()
    total = int(memory.total)
    available = int(memory.available)
    used = total - available
    percent = (used / total) * 100 if total > 0 else 0.0

    return MemoryInfo(total=total, available=available, used=used, percent=percent)


def hostname() -> str:
    return socket.gethostname() or "unknown"


def system_snapshot() -> SystemInfo:
    """OS, architecture, logical CPU count and hostname."""
    return SystemInfo(
        os=sys.platform,
        arch=platform.machine(),
        cpu_count=psutil.cpu_count() or 0,
        hostname=hostname(),
    )
