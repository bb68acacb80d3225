"""Image filters, face-box drawing, depth-map helpers and a filter pipeline for BGR numpy images."""

__version__ = "0.1.0"

__all__ = ["depth", "faces", "filters", "pipeline", "timing"]