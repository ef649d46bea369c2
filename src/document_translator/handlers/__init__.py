"""Handlers package for document translator."""
