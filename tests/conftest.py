import pytest

from hwstats.core.sources import Sample


class FakeSource:
    """MetricSource stand-in that replays scripted readings."""

    def __init__(self, temps=(50.0,), cpus=(10.0,), mems=(40.0,), dump=("MemTotal: 1000 kB",)):
        self.temps = list(temps)
        self.cpus = list(cpus)
        self.mems = list(mems)
        self.dump = list(dump)
        self.cpu_calls = 0

    @staticmethod
    def _next(values):
        return values.pop(0) if len(values) > 1 else values[0]

    def read_temperature(self):
        return self._next(self.temps)

    def read_cpu_usage(self, state):
        self.cpu_calls += 1
        return self._next(self.cpus)

    def read_mem_usage_percent(self):
        return self._next(self.mems)

    def read_metric_dump(self):
        return list(self.dump)


@pytest.fixture
def fake_source():
    return FakeSource()


@pytest.fixture
def sample():
    return Sample(temperature=52.3, cpu_percent=12.34, mem_percent=61.0)
