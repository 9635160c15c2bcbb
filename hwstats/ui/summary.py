from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Summary:
    title: str
    lines: Tuple[str, ...]


def performance_summary(sample) -> Summary:
    return Summary(
        title="Performance Data:",
        lines=(
            "Temperature: %.2f °C" % sample.temperature,
            "CPU: %.1f %%" % sample.cpu_percent,
            "Memory Used: %.1f %%" % sample.mem_percent,
        ),
    )


def memory_summary(dump_lines) -> Summary:
    """Raw meminfo / stat lines under a header."""
    return Summary(title="Memory Data:", lines=tuple(dump_lines))
