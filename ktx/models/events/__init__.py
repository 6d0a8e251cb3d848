"""Runtime events."""
