"""LZ-String compression and a helper for sending LLVM module text to a viewer."""

__version__ = "0.1.0"
__all__ = ["dump", "lzstring"]