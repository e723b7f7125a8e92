"""This file is loaded by pytest automatically. Fixtures defined here are available to all tests in the folder.

https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

import pytest
from textual.geometry import Region, Size

from cell_paint.surface import RenderSurface


@pytest.fixture(params=[False, True], ids=["unicode", "ascii"])
def each_charset(request: pytest.FixtureRequest):
    """Fixture to test with and without --ascii-only."""
    from cell_paint.args import args
    args.ascii_only = request.param

    yield request.param # run the test

    args.ascii_only = False


class FlushRecorder:
    """Collects the regions reported by RenderSurface.flush()."""

    def __init__(self) -> None:
        self.regions: list[Region] = []

    def __call__(self, region: Region) -> None:
        self.regions.append(region)


@pytest.fixture
def flushes() -> FlushRecorder:
    return FlushRecorder()


@pytest.fixture
def surface(flushes: FlushRecorder) -> RenderSurface:
    """A 60x20 surface, already flushed once so that only new drawing is reported."""
    surface = RenderSurface(Size(60, 20), on_flush=flushes)
    surface.flush()
    flushes.regions.clear()
    return surface
