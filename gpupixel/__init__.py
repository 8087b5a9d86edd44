"""Image-pipeline building blocks: matrices, vectors, task queues, rotations and sources."""

__version__ = "0.1.0"

__all__ = ["dispatch_queue", "matrix", "rotation", "source", "util", "vector"]