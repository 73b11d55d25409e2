"""Developer CLI (requires the ``cli`` extra)."""
