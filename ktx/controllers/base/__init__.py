"""Base controller and command runner."""
