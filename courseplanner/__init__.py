"""Course catalogue loading, lookup and sorted listing, with an interactive menu."""

__version__ = "1.0.0"
__all__ = ["course", "sorting", "hashmap", "cli"]