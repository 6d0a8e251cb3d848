"""Kubeconfig persistence."""
