"""Core data model, time sources, and the run entry point."""
