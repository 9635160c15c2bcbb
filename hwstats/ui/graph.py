"""Three stacked, fixed-calibration line charts drawn with Pillow."""
from hwstats.constants import (
    BG_COLOR, BORDER_COLOR, BOTTOM_PAD, CPU_SPEC, GRAPH_HEIGHT, GRAPH_MARGIN,
    GRID_COLOR, GRID_DIVISIONS, LABEL_GUTTER, LINE_WIDTH, MARKER_RADIUS,
    MEM_SPEC, MIN_TOP, PANEL_COLOR, TEMP_SPEC, TEXT_COLOR, V_SPACING,
)


def _text_size(draw, text, font):
    bbox = draw.textbbox((0, 0), text, font=font)
    w = bbox[2] - bbox[0]
    h = bbox[3] - bbox[1]
    return w, h


def normalize(value, minv, maxv):
    """Rescale value to [0, 1] against the chart range, clamped."""
    if maxv == minv:
        return 0.0
    n = (value - minv) / (maxv - minv)
    return max(0.0, min(1.0, n))


def map_points(values, x0, y0, width, height, minv, maxv):
    """
    Pixel coordinates for a series. Whatever number of points exists is
    spread across the full width, so short histories look stretched.
    """
    n = len(values)
    step = width / max(n - 1, 1)
    points = []
    for i, v in enumerate(values):
        x = x0 + i * step
        y = y0 + height * (1.0 - normalize(v, minv, maxv))
        points.append((x, y))
    return points


def stack_layout(width, height):
    """(x, [y per chart], w, h) for the three charts, anchored to the bottom."""
    g_x = GRAPH_MARGIN
    g_w = max(width - GRAPH_MARGIN - LABEL_GUTTER, 1)

    total_h = GRAPH_HEIGHT * 3 + V_SPACING * 2
    start_y = height - total_h - BOTTOM_PAD
    if start_y < MIN_TOP:
        start_y = MIN_TOP

    ys = [start_y + k * (GRAPH_HEIGHT + V_SPACING) for k in range(3)]
    return g_x, ys, g_w, GRAPH_HEIGHT


def draw_single_graph(draw, g_x, g_y, g_w, g_h, metric, values, fonts):
    font_title, font_label = fonts

    # panel
    draw.rectangle([g_x, g_y, g_x + g_w, g_y + g_h], fill=PANEL_COLOR)

    # border
    draw.rectangle([g_x - 1, g_y - 1, g_x + g_w + 1, g_y + g_h + 1],
                   outline=BORDER_COLOR, width=1)

    # quartile grid, not aligned to values; the first and last lines overlap the border
    for i in range(GRID_DIVISIONS + 1):
        yy = g_y + g_h * i / GRID_DIVISIONS
        draw.line([(g_x, yy), (g_x + g_w, yy)], fill=GRID_COLOR, width=1)

    # min / max labels on the right
    top_label = "%.1f" % metric.maxv
    bot_label = "%.1f" % metric.minv
    _, blh = _text_size(draw, bot_label, font_label)
    draw.text((g_x + g_w + 6, g_y), top_label, font=font_label, fill=TEXT_COLOR)
    draw.text((g_x + g_w + 6, g_y + g_h - blh), bot_label, font=font_label, fill=TEXT_COLOR)

    if values:
        points = map_points(values, g_x, g_y, g_w, g_h, metric.minv, metric.maxv)
        if len(points) > 1:
            draw.line(points, fill=metric.color, width=LINE_WIDTH)

        # latest point marker
        lx, ly = points[-1]
        r = MARKER_RADIUS
        draw.ellipse([lx - r, ly - r, lx + r, ly + r], fill=metric.color)

    # title
    _, th = _text_size(draw, metric.title, font_title)
    draw.text((g_x, g_y - 6 - th), metric.title, font=font_title, fill=TEXT_COLOR)


def _latest(series, occupancy):
    if occupancy <= 0:
        return []
    return list(series[-occupancy:])


def render(draw, width, height, snapshot, fonts):
    """
    Draw temperature, CPU and memory charts into `draw`.

    Returns the chart rectangles as (x, y, w, h), top to bottom.
    """
    draw.rectangle([0, 0, width, height], fill=BG_COLOR)

    g_x, ys, g_w, g_h = stack_layout(width, height)
    charts = [
        (TEMP_SPEC, snapshot.temperature),
        (CPU_SPEC, snapshot.cpu),
        (MEM_SPEC, snapshot.memory),
    ]

    rects = []
    for (metric, series), g_y in zip(charts, ys):
        values = _latest(series, snapshot.occupancy)
        draw_single_graph(draw, g_x, g_y, g_w, g_h, metric, values, fonts)
        rects.append((g_x, g_y, g_w, g_h))
    return rects
