"""pathnorm — normalize restricted SVG path data to rounded absolute coordinates."""

__version__ = "0.1.0"
