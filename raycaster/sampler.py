"""
Viewport sampling.

The sampler maps a discrete (column, row) grid onto points of the viewport,
starting at the upper-left corner and moving right, then down. One sample
per pixel; there is no jitter.

Samples can be fetched directly with `Sampler.sample_at`, which lets a
caller split the grid however it likes, or enumerated in row-major order by
iterating over the sampler.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .vec3 import Point
from .viewport import Viewport


@dataclass(frozen=True)
class Sample:
    """A viewport point tagged with the pixel it belongs to."""
    point: Point
    column: int
    row: int


class Sampler:
    """Enumerates ``width_samples * height_samples`` points over a viewport."""

    def __init__(self, viewport: Viewport, width_samples: int, height_samples: int):
        """Create a sampler.

        Args:
            viewport: The rectangle to cover
            width_samples: Number of columns
            height_samples: Number of rows
        """
        if width_samples <= 0 or height_samples <= 0:
            raise ValueError(
                f"Sample grid must be positive, got {width_samples}x{height_samples}"
            )
        self.viewport = viewport
        self.width_samples = width_samples
        self.height_samples = height_samples
        self.width_delta = viewport.width / width_samples
        self.height_delta = viewport.height / height_samples

    def sample_at(self, column: int, row: int) -> Sample:
        """Return the sample for one grid cell.

        Raises:
            IndexError: if (column, row) lies outside the grid
        """
        if not (0 <= column < self.width_samples and 0 <= row < self.height_samples):
            raise IndexError(
                f"Sample ({column}, {row}) outside "
                f"{self.width_samples}x{self.height_samples} grid"
            )
        origin = self.viewport.upper_left
        point = Point(
            origin.x + self.width_delta * column,
            origin.y - self.height_delta * row,
            origin.z
        )
        return Sample(point, column, row)

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield every (column, row) pair in row-major order."""
        for row in range(self.height_samples):
            for column in range(self.width_samples):
                yield column, row

    def row(self, row: int) -> list[Sample]:
        """All samples of one row, left to right."""
        return [self.sample_at(column, row) for column in range(self.width_samples)]

    def __iter__(self) -> SampleIterator:
        return SampleIterator(self)

    def __len__(self) -> int:
        return self.width_samples * self.height_samples

    def __repr__(self) -> str:
        return f"Sampler({self.width_samples}x{self.height_samples}, {self.viewport})"


class SampleIterator:
    """A single pass over a sampler's grid.

    Once the last row has been produced every further `next()` raises
    StopIteration. Iterate the sampler again for a fresh pass.
    """

    def __init__(self, sampler: Sampler):
        self._sampler = sampler
        self._column = 0
        self._row = 0

    def __iter__(self) -> SampleIterator:
        return self

    def __next__(self) -> Sample:
        if self._row >= self._sampler.height_samples:
            raise StopIteration

        sample = self._sampler.sample_at(self._column, self._row)

        self._column += 1
        if self._column >= self._sampler.width_samples:
            self._column = 0
            self._row += 1

        return sample
