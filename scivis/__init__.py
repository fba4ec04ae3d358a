"""Building blocks for scientific visualization: colour, imaging, wave simulation, arcball, volumes, flow fields, clipping and isocontour tables."""

__version__ = "0.1.0"