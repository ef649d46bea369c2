"""Event-triggered document translation worker."""
