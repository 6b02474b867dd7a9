"""HTTP service and CLI for dynamic regex badges."""
