"""ktx - interactive kubeconfig dashboard."""

__version__ = "0.1.0"
