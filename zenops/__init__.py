"""Safe relative paths, ${name} templates, config merging helpers and ANSI styling."""

__version__ = "0.12.0"
__all__ = ["ansi", "config", "expand", "expand_lookup", "safepath"]