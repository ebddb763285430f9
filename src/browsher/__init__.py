"""browsher: resolve files in a Git working tree to web URLs."""

__version__ = "0.1.0"
