"""
Renderer module - drives the camera and writes images.

Implements:
- Row-parallel tracing with a thread pool (optional)
- Progress reporting
- Pixel list to image array conversion
- PNG (or any Pillow-supported format) output
"""

from __future__ import annotations
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Callable, Iterable
import numpy as np

from .camera import Camera, Pixel
from .scene import Scene

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 500
    height: int = 500
    num_threads: int = 1  # 0 = auto-detect
    honor_light_switch: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads must be >= 0, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Traces a scene through a camera and turns the pixels into an image."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Scene, camera: Camera) -> list[Pixel]:
        """Trace every sample of the camera.

        Rows are traced independently, on a thread pool when
        ``num_threads > 1``, and joined back in row order, so the result is
        the same as a sequential `Camera.shoot`.

        Args:
            scene: The scene to render
            camera: The camera to render from

        Returns:
            One Pixel per sample in row-major order
        """
        sampler = camera.sampler()
        height = sampler.height_samples
        completed_rows = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        logger.info(
            "Rendering %dx%d with %d thread(s), %d shape(s), %d light(s)",
            sampler.width_samples, height, self.settings.num_threads,
            len(scene.shapes()), len(scene.lights())
        )

        def render_row(row: int) -> list[Pixel]:
            pixels = camera.trace_samples(sampler.row(row), scene)
            with progress_lock:
                completed_rows[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed_rows[0] / height)
            return pixels

        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                rows = list(executor.map(render_row, range(height)))
        else:
            rows = [render_row(row) for row in range(height)]

        pixels = [pixel for row in rows for pixel in row]
        camera.pixels = pixels
        logger.info("Rendered %d pixels", len(pixels))
        return pixels

    @staticmethod
    def to_image(pixels: Iterable[Pixel], width: int, height: int) -> np.ndarray:
        """Place pixels into an 8-bit RGB array by their (column, row).

        Channels are scaled by 255 and truncated. Values outside [0, 1] are
        clipped.

        Args:
            pixels: Traced pixels, in any order
            width: Image width
            height: Image height

        Returns:
            uint8 array of shape (height, width, 3); unset pixels are black
        """
        image = np.zeros((height, width, 3), dtype=np.float64)
        for pixel in pixels:
            image[pixel.row, pixel.column] = pixel.color.to_array()
        return np.clip(np.trunc(image * 255), 0, 255).astype(np.uint8)

    def save_image(self, pixels: Iterable[Pixel], filename: str,
                   width: int = None, height: int = None) -> None:
        """Save pixels to an image file.

        Args:
            pixels: Traced pixels
            filename: Output filename (extension determines format)
            width: Image width (defaults to settings)
            height: Image height (defaults to settings)
        """
        from PIL import Image as PILImage

        width = width or self.settings.width
        height = height or self.settings.height
        image = self.to_image(pixels, width, height)
        PILImage.fromarray(image).save(filename)
        logger.info("Saved %dx%d image to %s", width, height, filename)
