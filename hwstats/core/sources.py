import logging
import re
import subprocess
from collections import namedtuple
from dataclasses import dataclass
from typing import List, Optional

from hwstats import constants

log = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d*)?")

CPU_MARKER = "cpu"
CPU_FIELDS = ("user", "nice", "system", "idle", "iowait",
              "irq", "softirq", "steal", "guest", "guest_nice")
CPU_MIN_FIELDS = 4


@dataclass(frozen=True)
class Sample:
    temperature: float
    cpu_percent: float
    mem_percent: float


@dataclass
class CpuCounterState:
    """Counters from the previous /proc/stat read."""
    prev_total: int = 0
    prev_idle: int = 0
    has_previous: bool = False


class CpuTimes(namedtuple("CpuTimes", CPU_FIELDS)):
    __slots__ = ()

    @property
    def idle_all(self):
        return self.idle + self.iowait

    @property
    def non_idle(self):
        return (self.user + self.nice + self.system
                + self.irq + self.softirq + self.steal)

    @property
    def total(self):
        return self.idle_all + self.non_idle


@dataclass
class MemInfo:
    """Values from /proc/meminfo, in kB."""
    total: int = 0
    available: int = 0
    free: int = 0
    buffers: int = 0
    cached: int = 0

    @property
    def effective_available(self) -> int:
        # MemAvailable wins; older kernels only give the parts
        if self.available > 0:
            return self.available
        return self.free + self.buffers + self.cached


_MEMINFO_KEYS = {
    "MemTotal": "total",
    "MemAvailable": "available",
    "MemFree": "free",
    "Buffers": "buffers",
    "Cached": "cached",
}


# ---------- Parsers ----------

def parse_temperature(text: str) -> Optional[float]:
    """
    First decimal number found in free-form text, e.g. "temp=52.3'C" -> 52.3.
    Returns None when the text has no digits at all.
    """
    if not text:
        return None
    m = _NUMBER_RE.search(text)
    if m is None:
        return None
    return float(m.group(0))


def parse_cpu_line(line: str) -> Optional[CpuTimes]:
    """
    Parse the aggregate "cpu ..." line of /proc/stat.

    At least four counters are required; the optional ones that are
    missing count as 0.
    """
    parts = line.split()
    if not parts or parts[0] != CPU_MARKER:
        return None

    values = []
    for token in parts[1:1 + len(CPU_FIELDS)]:
        if not token.isdecimal():
            break
        values.append(int(token))

    if len(values) < CPU_MIN_FIELDS:
        return None
    values.extend([0] * (len(CPU_FIELDS) - len(values)))
    return CpuTimes(*values)


def parse_meminfo(text: str) -> MemInfo:
    info = MemInfo()
    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep:
            continue
        attr = _MEMINFO_KEYS.get(key.strip())
        if attr is None:
            continue
        fields = rest.split()
        if not fields or not fields[0].isdecimal():
            continue
        setattr(info, attr, int(fields[0]))
    return info


def mem_usage_percent(info: MemInfo) -> float:
    if info.total <= 0:
        return 0.0
    avail = min(info.effective_available, info.total)
    used = (1.0 - avail / info.total) * 100.0
    return max(0.0, min(100.0, used))


def cpu_usage_from(times: CpuTimes, state: CpuCounterState) -> float:
    """Usage over the interval since the previous read; updates state."""
    usage = 0.0
    if state.has_previous:
        total_d = times.total - state.prev_total
        idle_d = times.idle_all - state.prev_idle
        if total_d > 0:
            usage = (total_d - idle_d) * 100.0 / total_d

    state.prev_total = times.total
    state.prev_idle = times.idle_all
    state.has_previous = True
    return usage


# ---------- Helpers ----------

def _run_command(cmd, timeout=None) -> str:
    """Run command and return stdout as text ('' on error)."""
    try:
        out = subprocess.check_output(
            cmd,
            stderr=subprocess.DEVNULL,
            timeout=timeout
        )
        return out.decode("utf-8", errors="ignore").strip()
    except (OSError, subprocess.SubprocessError) as e:
        log.debug("Command %s failed: %s", cmd, e)
        return ""


def _read_first_line(path: str) -> Optional[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            return f.readline()
    except OSError as e:
        log.debug("Cannot read %s: %s", path, e)
        return None


class MetricSource:
    """Reads instantaneous temperature, CPU and memory values from the host."""

    def __init__(self,
                 temp_command=None,
                 thermal_path=constants.THERMAL_ZONE_PATH,
                 stat_path=constants.PROC_STAT_PATH,
                 meminfo_path=constants.MEMINFO_PATH):
        self.temp_command = temp_command if temp_command is not None else constants.TEMP_COMMAND
        self.thermal_path = thermal_path
        self.stat_path = stat_path
        self.meminfo_path = meminfo_path

    def read_temperature(self) -> float:
        """°C, or 0.0 when neither the vendor tool nor sysfs gives a value."""
        # vendor tool first
        if self.temp_command:
            out = _run_command(self.temp_command, timeout=constants.TEMP_COMMAND_TIMEOUT)
            temp = parse_temperature(out)
            if temp is not None:
                return temp

        # then sysfs
        line = _read_first_line(self.thermal_path)
        if line is not None:
            fields = line.split()
            try:
                return int(fields[0]) / 1000.0
            except (IndexError, ValueError):
                log.debug("Bad thermal zone value: %r", line)

        return 0.0

    def read_cpu_usage(self, state: CpuCounterState) -> float:
        line = _read_first_line(self.stat_path)
        if not line:
            return 0.0
        times = parse_cpu_line(line)
        if times is None:
            log.debug("Unparsable cpu line: %r", line)
            return 0.0
        return cpu_usage_from(times, state)

    def read_mem_usage_percent(self) -> float:
        try:
            with open(self.meminfo_path, "r", encoding="utf-8", errors="ignore") as f:
                text = f.read()
        except OSError as e:
            log.debug("Cannot read %s: %s", self.meminfo_path, e)
            return 0.0
        return mem_usage_percent(parse_meminfo(text))

    def read_metric_dump(self) -> List[str]:
        """A few raw meminfo lines plus a /proc/stat snippet, for display."""
        lines = []
        try:
            with open(self.meminfo_path, "r", encoding="utf-8", errors="ignore") as f:
                for _ in range(constants.MEM_LINES):
                    line = f.readline()
                    if not line:
                        break
                    lines.append(line.rstrip("\n"))
        except OSError:
            lines.append("Memory: unable to open %s" % self.meminfo_path)

        cpu_line = _read_first_line(self.stat_path)
        if cpu_line is None:
            lines.append("CPU: unable to open %s" % self.stat_path)
        else:
            snippet = cpu_line.rstrip("\n")[len(CPU_MARKER):len(CPU_MARKER) + 10]
            lines.append("Cpu:" + snippet)
        return lines
