"""Iterator helpers: k-way merging, k-smallest selection and a lazily filled buffer."""

__version__ = "0.1.0"

__all__ = ["k_smallest", "kmerge", "lazy_buffer"]