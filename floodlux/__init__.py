"""
Floodlux: photometric calculation kernel for outdoor lighting design.

Samples the illuminance field of floodlights over an area, reduces it to
quality metrics, checks them against lighting standards and derives isolux
bands, boundary spill, energy estimates and a greedy fixture layout.
"""

__version__ = "0.1.0"
