"""McFlurry ratings: store catalog ranking and rating aggregation."""

__version__ = "0.1.0"
