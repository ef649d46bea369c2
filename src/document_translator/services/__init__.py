"""Services package for document translator."""
