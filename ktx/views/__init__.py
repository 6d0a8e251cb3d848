"""Views rendered by the ktx runtime."""
