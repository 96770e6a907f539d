"""Collect and print a short summary of the running system."""

from __future__ import annotations

import argparse
import math
import os
import platform
import socket
import subprocess
import time
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import psutil

from ferrisplay.colors import COLOR_FG_BLUE, FORMAT_BOLD, FORMAT_RESET

_SEPARATOR = ", "

_OS_NAMES = {
    "linux": "Linux",
    "macos": "macOS",
    "ios": "iOS",
    "freebsd": "FreeBSD",
    "dragonfly": "DragonflyBSD",
    "netbsd": "NetBSD",
    "openbsd": "OpenBSD",
    "solaris": "Solaris the very cursed OS",
    "android": "Android",
    "windows": "Windows but you are going to install Linux right now",
}

# Maps what platform.system() reports to the short lower-case OS identifiers.
_PLATFORM_SYSTEMS = {
    "Linux": "linux",
    "Darwin": "macos",
    "iOS": "ios",
    "iPadOS": "ios",
    "FreeBSD": "freebsd",
    "DragonFly": "dragonfly",
    "NetBSD": "netbsd",
    "OpenBSD": "openbsd",
    "SunOS": "solaris",
    "Android": "android",
    "Windows": "windows",
}

_PROCESS_LABELS = (
    (psutil.STATUS_RUNNING, "running"),
    (psutil.STATUS_IDLE, "idle"),
    (psutil.STATUS_SLEEPING, "in sleep"),
    (psutil.STATUS_STOPPED, "stopped"),
    (psutil.STATUS_ZOMBIE, "zombie"),
    (psutil.STATUS_TRACING_STOP, "tracing"),
    (psutil.STATUS_DEAD, "dead"),
    (psutil.STATUS_WAKE_KILL, "in wake kill"),
    (psutil.STATUS_PARKED, "parked"),
    (psutil.STATUS_LOCKED, "blocked on lock"),
    (psutil.STATUS_DISK_SLEEP, "in disk sleep"),
)

_UNKNOWN = "(unknown)"


def _strip_separator(text: str) -> str:
    if not text.endswith(_SEPARATOR):
        raise ValueError("nothing to describe")
    return text[: -len(_SEPARATOR)]


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def convert_seconds(seconds: int) -> str:
    """Describe a duration in days, hours and minutes.

    Raises ValueError when the duration is shorter than a minute.
    """
    days = seconds // 86400
    hours = (seconds // 3600) % 24
    minutes = (seconds // 60) % 60
    text = "".join(
        _plural(count, unit) + _SEPARATOR
        for count, unit in ((days, "day"), (hours, "hour"), (minutes, "minute"))
        if count > 0
    )
    return _strip_separator(text)


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_size(size: int) -> str:
    """Format a byte count as B, KiB or MiB, rounded to a whole number."""
    if size > 1048576:
        return f"{_round_half_away(size / 1048576.0)} MiB"
    if size > 1024:
        return f"{_round_half_away(size / 1024.0)} KiB"
    return f"{size} B"


def get_version_string(shell_path: str) -> str | None:
    """Run ``<shell_path> --version`` and return its output.

    Returns None when the output is not valid UTF-8; raises OSError when
    the program cannot be started.
    """
    completed = subprocess.run(
        [shell_path, "--version"],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        stdin=subprocess.DEVNULL,
        check=False,
    )
    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None


def describe_processes(statuses: Iterable[str]) -> str:
    """Summarise process status values as counts per known status.

    Raises ValueError when no status matches a known one.
    """
    counts = Counter(statuses)
    text = "".join(
        f"{counts[status]} {label}{_SEPARATOR}"
        for status, label in _PROCESS_LABELS
        if counts[status] > 0
    )
    return _strip_separator(text)


def os_display_name(os_name: str) -> str:
    """Return the display name for a short OS identifier such as ``linux``."""
    return _OS_NAMES.get(os_name, os_name)


def architecture_name(arch: str) -> str:
    """Return the display name of a CPU architecture."""
    return "arm64" if arch == "aarch64" else arch


@dataclass(frozen=True)
class SystemReport:
    """The facts shown in the system summary."""

    user_name: str
    computer_name: str
    os_name: str
    os_version: str
    os_architecture: str
    kernel_name: str
    kernel_version: str
    uptime: str
    processes: str
    shell: str
    cpu: str
    memory: str

    def render(self) -> str:
        """Return the coloured summary as lines joined by newlines."""
        fields = (
            ("OS", f"{self.os_name} {self.os_version} {self.os_architecture}"),
            ("Kernel", f"{self.kernel_name} {self.kernel_version}"),
            ("Uptime", self.uptime),
            ("Processes", self.processes),
            ("Shell", self.shell),
            ("CPU", self.cpu),
            ("Memory", self.memory),
        )
        header = (
            f"{FORMAT_BOLD}{COLOR_FG_BLUE}"
            f"{self.user_name}@{self.computer_name}{FORMAT_RESET}"
        )
        lines = [header]
        lines.extend(
            f"{COLOR_FG_BLUE}{label}{FORMAT_RESET}: {value}" for label, value in fields
        )
        return "\n".join(lines)


def _os_release() -> dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def _os_identifier() -> str:
    system = platform.system()
    return _PLATFORM_SYSTEMS.get(system, system.lower())


def _os_version(os_id: str, release: dict[str, str]) -> str:
    if os_id == "linux":
        return release.get("VERSION_ID", "")
    if os_id == "macos":
        return platform.mac_ver()[0]
    return platform.version()


def _user_name() -> str:
    try:
        return psutil.Process().username() or _UNKNOWN
    except (psutil.Error, KeyError, OSError):
        return _UNKNOWN


def _cpu_brand() -> str:
    cpuinfo = Path("/proc/cpuinfo")
    if cpuinfo.is_file():
        for line in cpuinfo.read_text(errors="replace").splitlines():
            key, _, value = line.partition(":")
            if key.strip() == "model name":
                return value.strip()
    return platform.processor()


def _process_statuses() -> list[str]:
    statuses = []
    for process in psutil.process_iter(["status"]):
        status = process.info.get("status")
        if status is not None:
            statuses.append(status)
    return statuses


def _shell() -> str:
    shell_path = os.environ.get("SHELL")
    if shell_path is None:
        return "Unknown"
    version = get_version_string(shell_path)
    return version.strip() if version is not None else "Unknown"


def collect_report() -> SystemReport:
    """Gather the facts about the running system."""
    os_id = _os_identifier()
    os_name = os_display_name(os_id)
    release = _os_release() if os_id == "linux" else {}
    os_version = _os_version(os_id, release)
    kernel_name = release.get("NAME") or platform.system() or os_name
    kernel_version = platform.release() or os_version
    memory = psutil.virtual_memory()
    used = memory.total - memory.available

    return SystemReport(
        user_name=_user_name(),
        computer_name=socket.gethostname() or _UNKNOWN,
        os_name=os_name,
        os_version=os_version,
        os_architecture=architecture_name(platform.machine()),
        kernel_name=kernel_name,
        kernel_version=kernel_version,
        uptime=convert_seconds(int(time.time() - psutil.boot_time())),
        processes=describe_processes(_process_statuses()),
        shell=_shell(),
        cpu=_cpu_brand(),
        memory=f"{format_size(used)}/{format_size(memory.total)}",
    )


def main(argv: list[str] | None = None) -> int:
    """Print the system summary."""
    parser = argparse.ArgumentParser(
        prog="ferrisplay-fetch",
        description="Print a short summary of the running system.",
    )
    parser.parse_args(argv)
    report = collect_report()
    print(report.render())
    return 0