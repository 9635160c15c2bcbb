from PIL import ImageFont

from hwstats.constants import FONT_BOLD_PATH, FONT_PATH


def load_fonts():
    """
    Fonts:
    - font_title : chart titles and summary headers
    - font_label : min/max labels and summary lines
    """
    try:
        font_title = ImageFont.truetype(FONT_BOLD_PATH, 13)
        font_label = ImageFont.truetype(FONT_PATH, 11)
    except OSError:
        font_title = ImageFont.load_default()
        font_label = ImageFont.load_default()
    return font_title, font_label
