"""English to French and Spanish word translation with aligned embeddings."""

__version__ = "0.1.0"