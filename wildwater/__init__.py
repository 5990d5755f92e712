"""Per-plant aggregation of water-network data into histogram files."""

__version__ = "0.1.0"
__all__ = ["avl", "csv_parser", "histo", "cli"]