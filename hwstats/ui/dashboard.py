from PIL import Image, ImageDraw

from hwstats.constants import BG_COLOR, DIM_TEXT_COLOR, TEXT_COLOR
from hwstats.ui.graph import render
from hwstats.ui.summary import memory_summary, performance_summary

SUMMARY_X = 10
SUMMARY_Y = 6
ROW_H = 14
INDENT = 8


def _draw_summary(draw, x, y, summary, fonts):
    font_title, font_label = fonts
    draw.text((x, y), summary.title, font=font_title, fill=TEXT_COLOR)
    y += ROW_H + 2
    for line in summary.lines:
        draw.text((x + INDENT, y), line, font=font_label, fill=DIM_TEXT_COLOR)
        y += ROW_H
    return y


def draw_dashboard(monitor, width, height, fonts):
    """Full frame: the three graphs plus the two text blocks above them."""
    img = Image.new("RGB", (width, height), BG_COLOR)
    draw = ImageDraw.Draw(img, "RGBA")

    render(draw, width, height, monitor.history.snapshot(), fonts)

    # ---------- text blocks on top ----------
    y = _draw_summary(draw, SUMMARY_X, SUMMARY_Y, performance_summary(monitor.latest), fonts)
    _draw_summary(draw, SUMMARY_X, y + 6, memory_summary(monitor.metric_dump), fonts)
    return img
