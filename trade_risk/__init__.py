"""
Trade Risk - Trade Risk & Position-Sizing Engine

Pure numeric functions and immutable data structures for computing and
validating entry/target/stop levels, risk/reward ratios, position sizes
and Kelly-criterion sizing for stock trade plans and watchlists.
"""

__version__ = "0.1.0"
__author__ = "Trade Risk Team"
