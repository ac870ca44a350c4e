"""Read, write and validate RSS feed elements: items, GUIDs, sources, images and text inputs."""

__version__ = "0.1.0"