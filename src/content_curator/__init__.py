"""Content Curator - tag-based classification and surface selection for editorial content."""

__version__ = "0.1.0"
