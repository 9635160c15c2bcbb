import logging
import os
import tempfile

from PIL import Image

from hwstats.constants import BG_COLOR

log = logging.getLogger(__name__)


class ImageFileDisplay:
    """
    Shows frames by writing them to a PNG file, replaced atomically so an
    image viewer watching the path never reads a half-written frame.
    """

    def __init__(self, path, width, height):
        self.path = path
        self.W = width
        self.H = height

    def clear(self):
        self.show(Image.new("RGB", (self.W, self.H), BG_COLOR))

    def show(self, pil_img):
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(suffix=".png", dir=directory)
        except OSError as e:
            log.warning("Failed to write frame to %s: %s", self.path, e)
            return

        try:
            with os.fdopen(fd, "wb") as f:
                pil_img.save(f, format="PNG")
            os.replace(tmp_path, self.path)
        except OSError as e:
            log.warning("Failed to write frame to %s: %s", self.path, e)
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
