"""Application layer: chart queries orchestrating domain services."""
