import threading
from collections import namedtuple

from hwstats.constants import HISTORY_SIZE

HistorySnapshot = namedtuple("HistorySnapshot", ["temperature", "cpu", "memory", "occupancy"])


class HistoryStore:
    """
    Three rolling buffers (temperature, cpu, memory) with one shared count.

    Ring buffer: `_head` is the slot the next value goes to, `_count` is how
    many slots hold real values. Once full, each append overwrites the
    oldest slot.
    """

    def __init__(self, capacity=HISTORY_SIZE):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._temp = [0.0] * capacity
        self._cpu = [0.0] * capacity
        self._mem = [0.0] * capacity
        self._head = 0
        self._count = 0
        self._lock = threading.Lock()

    def __len__(self):
        return self._count

    @property
    def occupancy(self):
        return self._count

    def append(self, temperature, cpu, mem):
        with self._lock:
            i = self._head
            self._temp[i] = float(temperature)
            self._cpu[i] = float(cpu)
            self._mem[i] = float(mem)
            self._head = (i + 1) % self.capacity
            if self._count < self.capacity:
                self._count += 1

    def seed(self, temperature, cpu, mem):
        """Fill every slot with one value per metric."""
        with self._lock:
            self._temp = [float(temperature)] * self.capacity
            self._cpu = [float(cpu)] * self.capacity
            self._mem = [float(mem)] * self.capacity
            self._head = 0
            self._count = self.capacity

    def _ordered(self, buf):
        # oldest first
        start = (self._head - self._count) % self.capacity
        return tuple(buf[(start + k) % self.capacity] for k in range(self._count))

    def snapshot(self) -> HistorySnapshot:
        with self._lock:
            return HistorySnapshot(
                temperature=self._ordered(self._temp),
                cpu=self._ordered(self._cpu),
                memory=self._ordered(self._mem),
                occupancy=self._count,
            )
