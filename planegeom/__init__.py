"""Planar and 3D coordinate geometry on flat float sequences: centroids,
simplification, vectors, distances, radial sorting and segment intersection."""

__version__ = "0.1.0"

__all__ = [
    "intersection",
    "location",
    "orientation",
    "point_centroid",
    "radial",
    "simplify",
    "vector",
    "xyz",
]