"""In-memory vector store with flat similarity search and metadata filtering."""

__version__ = "0.1.0"
__all__ = ["store", "similarity", "metadata_filter", "search_engine", "cli"]