"""remodel

A small domain model of home remodel projects moving through a fixed
sequence of phases, used to demonstrate grouping tests by feature and
nesting them by scenario.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
