# -*- coding: utf-8 -*-
import logging
import os
import textwrap

import numpy as np
import PIL
import PIL.Image
import PIL.PngImagePlugin

import fractalpaint as fp
import fractalpaint.settings
import fractalpaint.utils
from fractalpaint.core import Color


logger = logging.getLogger(__name__)


class Pixel_surface:
    def __init__(self, width=None, height=None):
        """
A pixel sink backed by a numpy RGB array of shape (height, width, 3).

Out-of-range paint requests are clipped silently: they are dropped and
counted in the `clipped` attribute. The bounding box of the pixels touched
since the last call to `pop_dirty_rect` is tracked, so that a host can
repaint only the modified region.

Parameters
----------
width : int | None
    Width in pixels, defaults to `fractalpaint.settings.surface_width`
height : int | None
    Height in pixels, defaults to `fractalpaint.settings.surface_height`
"""
        if width is None:
            width = fp.settings.surface_width
        if height is None:
            height = fp.settings.surface_height
        width = int(width)
        height = int(height)
        if width <= 1 or height <= 1:
            raise ValueError(
                f"Invalid surface dimensions: {width} x {height}"
            )
        self.width = width
        self.height = height
        self.arr = np.empty((height, width, 3), dtype=np.uint8)
        self.clipped = 0
        self.clear(Color.BACKGROUND)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.width} x {self.height}>"

    @property
    def size(self):
        return (self.width, self.height)

    def paint_pixel(self, x, y, color):
        """ Paints one pixel, silently ignored if outside the surface """
        if not ((0 <= x < self.width) and (0 <= y < self.height)):
            self.clipped += 1
            if self.clipped == 1:
                logger.debug(f"Clipping out-of-range pixel ({x}, {y})")
            return
        self.arr[y, x, :] = Color(color).rgb
        self._extend_dirty(x, y, x + 1, y + 1)

    def clear(self, color=Color.BACKGROUND):
        """ Paints the whole surface """
        self.arr[:, :, :] = Color(color).rgb
        self.clipped = 0
        self._dirty = (0, 0, self.width, self.height)

    def pop_dirty_rect(self):
        """
        Returns the region modified since the last call, as a tuple
        (x, y, width, height), or None if nothing was painted
        """
        dirty = self._dirty
        self._dirty = None
        if dirty is None:
            return None
        x0, y0, x1, y1 = dirty
        return (x0, y0, x1 - x0, y1 - y0)

    def _extend_dirty(self, x0, y0, x1, y1):
        if self._dirty is None:
            self._dirty = (x0, y0, x1, y1)
        else:
            dx0, dy0, dx1, dy1 = self._dirty
            self._dirty = (min(dx0, x0), min(dy0, y0),
                           max(dx1, x1), max(dy1, y1))

    def count(self, color):
        """ Number of pixels with this color """
        rgb = np.array(Color(color).rgb, dtype=np.uint8)
        return int(np.count_nonzero(np.all(self.arr == rgb, axis=2)))

    def to_image(self):
        """ A copy of the surface as a `PIL.Image.Image` (RGB mode) """
        return PIL.Image.fromarray(self.arr.copy())

    def save_png(self, im_path, tag_dict=None):
        """
        Saves the surface as a png file. The ".png" extension is added if
        missing.

        Parameters
        ----------
        im_path : str
            The file path
        tag_dict : dict | None
            Additional text tags stored in the png file

        Returns
        -------
        im_path : str
            The actual file path
        """
        if not im_path.lower().endswith(".png"):
            im_path = im_path + ".png"
        dirname = os.path.dirname(im_path)
        if dirname:
            fp.utils.mkdir_p(dirname)

        pnginfo = PIL.PngImagePlugin.PngInfo()
        tags = {"Software": f"fractalpaint v{fp.__version__}"}
        if tag_dict is not None:
            tags.update(tag_dict)
        for k, v in tags.items():
            pnginfo.add_text(k, str(v))

        self.to_image().save(im_path, format="png", pnginfo=pnginfo)
        logger.info(textwrap.dedent(f"""\
            Image saved: {im_path}
              {self.width} x {self.height} ; tags: {list(tags.keys())}"""
        ))
        return im_path

    def open_png(self, im_path):
        """
        Paints an image file onto the surface, from the upper left corner.
        The image is cropped if larger than the surface.
        """
        with PIL.Image.open(im_path) as im:
            arr = np.asarray(im.convert("RGB"))
        h = min(arr.shape[0], self.height)
        w = min(arr.shape[1], self.width)
        self.arr[:h, :w, :] = arr[:h, :w, :]
        self._extend_dirty(0, 0, w, h)
        logger.info(
            f"Image opened: {im_path} ({arr.shape[1]} x {arr.shape[0]})"
        )
