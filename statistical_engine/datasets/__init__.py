"""Random dataset generation."""

from .generator import GeneratedDataset, generate_dataset

__all__ = ["GeneratedDataset", "generate_dataset"]
