"""Controllers: the kubeconfig store, the connectivity prober and cloud import."""
