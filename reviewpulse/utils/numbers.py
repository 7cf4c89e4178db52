"""
Number formatting helpers.
"""

from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round to a fixed number of decimal places, ties away from zero.

    Works on the exact binary value of the float, so 3.125 rounds to
    3.13 while 1.005 (stored as 1.00499...) rounds to 1.0.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))



# Design Rationale and Trade-offs:
#
# 1. Why Decimal instead of the built-in round()?
#    - round() sends exact ties to the even digit (3.125 -> 3.12)
#    - Report percentages are read by people who expect 3.13
#    - Trade-off: Slower than round(), but only a handful of values per report
#
# 2. Why build the Decimal from the float, not from its repr?
#    - Rounds the value that was actually computed
#    - Matches fixed-point formatting in other report consumers
#    - Trade-off: 1.005 rounds down, which surprises some readers
