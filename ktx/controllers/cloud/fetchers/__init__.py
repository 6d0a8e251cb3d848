"""Per-provider option listing and credential import."""
