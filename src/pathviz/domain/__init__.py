"""Domain layer: value objects and pure services for chart data."""
