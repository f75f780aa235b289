"""HTTP service that stores uploaded images and returns grayscale, resized or blurred versions."""

__version__ = "0.1.0"
__all__ = ["ids", "processing", "session", "server"]