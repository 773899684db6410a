"""Cloud provider adapters for the domain ports."""
