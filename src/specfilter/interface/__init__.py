"""Command-line surface for specfilter."""
