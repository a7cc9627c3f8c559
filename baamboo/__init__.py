"""Scene, entity-component registry, camera and math core for a real-time 3D engine."""

__version__ = "0.1.0"