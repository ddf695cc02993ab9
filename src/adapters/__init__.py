"""Adapters between the core tools and the outside world (files, formats)."""
