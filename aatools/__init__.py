"""Console messages, path helpers, directory filters, file copying and process running."""

__version__ = "0.1.0"