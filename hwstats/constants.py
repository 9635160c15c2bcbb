from collections import namedtuple

# ---------- History / timing ----------

HISTORY_SIZE = 200      # how many points we keep per metric
SAMPLE_INTERVAL = 1.0   # seconds between samples
LOOP_SLEEP = 0.05       # main loop idle step

# ---------- Graph geometry ----------

GRAPH_HEIGHT = 100      # single graph pixel height
GRAPH_MARGIN = 10       # left margin
LABEL_GUTTER = 48       # right side, room for min/max labels
V_SPACING = 60          # vertical spacing between graphs
BOTTOM_PAD = 8
MIN_TOP = 30            # graphs never start above this y
GRID_DIVISIONS = 4
LINE_WIDTH = 2
MARKER_RADIUS = 3

FRAME_WIDTH = 920
FRAME_HEIGHT = 720

# ---------- Colors ----------

BG_COLOR = (15, 15, 15)
PANEL_COLOR = (20, 20, 20)
BORDER_COLOR = (64, 64, 64)
GRID_COLOR = (255, 255, 255, 15)
TEXT_COLOR = (255, 255, 255)
DIM_TEXT_COLOR = (200, 200, 200)

TEMP_COLOR = (26, 230, 51)
CPU_COLOR = (51, 153, 242)
MEM_COLOR = (242, 128, 26)

# ---------- Calibrations ----------

MetricSpec = namedtuple("MetricSpec", ["title", "minv", "maxv", "color"])

TEMP_SPEC = MetricSpec("Temperature (°C)", 30.0, 85.0, TEMP_COLOR)
CPU_SPEC = MetricSpec("CPU Usage (%)", 0.0, 100.0, CPU_COLOR)
MEM_SPEC = MetricSpec("Memory Used (%)", 0.0, 100.0, MEM_COLOR)

# ---------- Initial fill ----------

FALLBACK_TEMP = 40.0
FALLBACK_MEM = 10.0

# ---------- OS sources ----------

TEMP_COMMAND = ["vcgencmd", "measure_temp"]
TEMP_COMMAND_TIMEOUT = 0.5
THERMAL_ZONE_PATH = "/sys/class/thermal/thermal_zone0/temp"
PROC_STAT_PATH = "/proc/stat"
MEMINFO_PATH = "/proc/meminfo"
MEM_LINES = 6           # lines of /proc/meminfo shown in the summary

# ---------- Fonts ----------

FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
FONT_BOLD_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"
