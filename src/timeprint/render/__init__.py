"""Output template rendering."""
