"""Cloud provider import."""
