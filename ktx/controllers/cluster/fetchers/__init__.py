"""Cluster data fetchers."""
