"""
Unit tests for the rounding helper.
"""

import pytest
from reviewpulse.utils.numbers import round_half_up


@pytest.mark.parametrize("value,expected", [
    (3.125, 3.13),
    (0.625, 0.63),
    (15.625, 15.63),
    (33.333333, 33.33),
    (100.0, 100.0),
    (0.0, 0.0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_rounds_exact_binary_value():
    # 1.005 is stored just below 1.005
    assert round_half_up(1.005) == 1.0


def test_custom_places():
    assert round_half_up(0.5, places=0) == 1.0


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
