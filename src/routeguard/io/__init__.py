"""Route manifest decoding."""

from .manifest import load_route_file, parse_route

__all__ = ["load_route_file", "parse_route"]
