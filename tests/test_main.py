import itertools

from hwstats import main as hwmain
from hwstats.core.fonts import load_fonts
from hwstats.core.monitor import SystemMonitor

from conftest import FakeSource


class FakeDisplay:
    W = 320
    H = 480

    def __init__(self):
        self.frames = []

    def show(self, img):
        self.frames.append(img)

    def clear(self):
        self.frames.clear()


def test_run_draws_once_per_sample():
    monitor = SystemMonitor(source=FakeSource(temps=[50.0, 51.0, 52.0]))
    monitor.seed_history()
    hw = FakeDisplay()
    clock = itertools.count(10.0, 0.5).__next__
    sleeps = []

    frames = hwmain.run(monitor, hw, load_fonts(), max_frames=2,
                        sleep=sleeps.append, clock=clock)

    assert frames == 2
    assert len(hw.frames) == 2
    assert hw.frames[0].size == (320, 480)
    # t=10.0 sample + frame, t=10.5 idle, t=11.0 sample + frame
    assert len(sleeps) == 2
    assert len(monitor.history) == monitor.history.capacity
    assert monitor.history.snapshot().temperature[-3:] == (50.0, 51.0, 52.0)


def test_parse_args_defaults():
    args = hwmain.parse_args([])
    assert args.output == "hwstats.png"
    assert args.frames == 0
    assert args.log_level == "INFO"


def test_main_writes_frames(tmp_path, monkeypatch):
    monkeypatch.setattr(hwmain, "SystemMonitor", lambda: SystemMonitor(source=FakeSource()))
    out = tmp_path / "out.png"

    hwmain.main(["--output", str(out), "--width", "200", "--height", "150", "--frames", "1"])

    assert out.exists()
