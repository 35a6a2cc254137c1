"""WoofAreYou

A command-driven record keeper for pet boarding and daycare businesses.
It tracks pets, their owners, diets and appointments, records daily
attendance, and derives monthly charges from that attendance.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
