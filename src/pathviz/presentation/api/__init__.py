"""FastAPI application for chart data."""
