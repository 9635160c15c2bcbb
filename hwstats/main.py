#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Main entry point for the hwstats dashboard."""
import argparse
import logging
import time

from hwstats import constants
from hwstats.core.fonts import load_fonts
from hwstats.core.hw import ImageFileDisplay
from hwstats.core.monitor import SystemMonitor
from hwstats.ui.dashboard import draw_dashboard

log = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Temperature / CPU / memory dashboard")
    parser.add_argument("--output", default="hwstats.png",
                        help="PNG file the frames are written to")
    parser.add_argument("--width", type=int, default=constants.FRAME_WIDTH)
    parser.add_argument("--height", type=int, default=constants.FRAME_HEIGHT)
    parser.add_argument("--frames", type=int, default=0,
                        help="stop after this many frames (0 = run until Ctrl-C)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run(monitor, hw, fonts, max_frames=0, sleep=time.sleep, clock=time.time):
    """Sample once per interval and redraw whenever a new sample is in."""
    frames = 0
    while True:
        now = clock()
        monitor.sample(now)

        if monitor.take_redraw():
            img = draw_dashboard(monitor, hw.W, hw.H, fonts)
            hw.show(img)
            frames += 1
            if max_frames and frames >= max_frames:
                return frames

        sleep(constants.LOOP_SLEEP)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    hw = ImageFileDisplay(args.output, args.width, args.height)
    fonts = load_fonts()
    monitor = SystemMonitor()
    monitor.seed_history()

    log.info("Writing frames to %s (%dx%d)", args.output, args.width, args.height)
    try:
        frames = run(monitor, hw, fonts, max_frames=args.frames)
        log.info("Stopped after %d frames", frames)
    except KeyboardInterrupt:
        hw.clear()
        log.info("Exit by KeyboardInterrupt")


if __name__ == "__main__":
    main()
