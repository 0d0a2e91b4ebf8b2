"""Canada address autocomplete API backed by Elasticsearch."""

__version__ = "1.0.0"
