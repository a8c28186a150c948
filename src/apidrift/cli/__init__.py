"""apidrift CLI."""
