import pytest

from timelineplot.measure import CharWidthMeasurer


@pytest.fixture
def measurer() -> CharWidthMeasurer:
    # Every character is half the font size wide, bold or not.
    return CharWidthMeasurer(char_width_ratio=0.5, bold_factor=1.0)


@pytest.fixture
def two_items() -> dict:
    return {
        "title": "X",
        "items": [
            {"year": "2020", "title": "A"},
            {"year": "2021", "title": "B"},
        ],
    }
