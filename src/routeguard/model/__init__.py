"""Core data models for routeguard."""

from .entities import ObjectMeta, Route, RouteSpec, TrafficTarget

__all__ = [
    "ObjectMeta",
    "Route",
    "RouteSpec",
    "TrafficTarget",
]
