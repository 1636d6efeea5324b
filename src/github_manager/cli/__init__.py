"""Command-line interface (``ghmanager``)."""
