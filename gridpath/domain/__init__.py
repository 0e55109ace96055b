"""Domain layer: grid, node and path models."""
