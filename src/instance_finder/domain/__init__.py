"""Domain layer - instance lookup model and ports."""
