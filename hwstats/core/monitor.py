import logging
import time

from hwstats import constants
from hwstats.core.history import HistoryStore
from hwstats.core.sources import CpuCounterState, MetricSource, Sample

log = logging.getLogger(__name__)


class SystemMonitor:
    def __init__(self, source=None, interval=constants.SAMPLE_INTERVAL):
        """
        source    — MetricSource, the default one reads the local host
        interval  — seconds between samples
        """
        self.source = source if source is not None else MetricSource()
        self.interval = interval
        self.last_sample = 0.0

        self.history = HistoryStore()
        self.cpu_state = CpuCounterState()

        # latest values
        self.latest = Sample(0.0, 0.0, 0.0)
        self.metric_dump = []
        self.redraw_pending = False

    def seed_history(self):
        """
        Fill the whole history with flat placeholder values so the first
        frame already shows full-width lines.
        """
        init_t = self.source.read_temperature()
        if init_t <= 0.0:
            init_t = constants.FALLBACK_TEMP
        init_cpu = 0.0
        init_mem = self.source.read_mem_usage_percent()
        if init_mem < 1.0:
            init_mem = constants.FALLBACK_MEM

        self.history.seed(init_t, init_cpu, init_mem)
        self.latest = Sample(init_t, init_cpu, init_mem)
        self.metric_dump = self.source.read_metric_dump()
        self.redraw_pending = True
        log.info("History seeded: temp=%.1f cpu=%.1f mem=%.1f", init_t, init_cpu, init_mem)

    def sample_and_append(self) -> Sample:
        temp = self.source.read_temperature()
        if temp <= 0.0:
            temp = 0.0
        cpu = self.source.read_cpu_usage(self.cpu_state)
        mem = self.source.read_mem_usage_percent()

        self.history.append(temp, cpu, mem)
        self.latest = Sample(temp, cpu, mem)
        self.metric_dump = self.source.read_metric_dump()
        self.redraw_pending = True
        log.debug("Sample: temp=%.2f cpu=%.1f mem=%.1f", temp, cpu, mem)
        return self.latest

    def sample(self, now=None) -> bool:
        """Called every loop pass; takes a sample only when the interval is up."""
        if now is None:
            now = time.time()
        if now - self.last_sample < self.interval:
            return False
        self.last_sample = now
        self.sample_and_append()
        return True

    def take_redraw(self) -> bool:
        pending = self.redraw_pending
        self.redraw_pending = False
        return pending
