"""State models."""
