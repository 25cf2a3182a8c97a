"""Domain layer - Entities, value objects and services."""
