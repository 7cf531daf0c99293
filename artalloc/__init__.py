"""Article Allocator - split daily article lists across an editorial team."""

__version__ = "0.1.0"
