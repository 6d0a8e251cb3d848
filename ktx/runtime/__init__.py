"""Interactive runtime: event bus, view stack, orchestrator and render loop."""
