"""Cluster connectivity probing."""
