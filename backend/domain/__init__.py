"""Domain types shared across the engine."""
