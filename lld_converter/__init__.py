"""Alberta Legal Land Description converter.

Converts a Dominion Land Survey legal land description
(quarter section, section, township, range, meridian) into the
approximate latitude/longitude of the quarter-section centroid.
"""

__version__ = "0.1.0"
