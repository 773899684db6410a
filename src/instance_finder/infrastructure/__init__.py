"""Infrastructure layer - AWS clients and infrastructure errors."""
