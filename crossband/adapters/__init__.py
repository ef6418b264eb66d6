from .normalize import normalize_pairs

__all__ = ["normalize_pairs"]
