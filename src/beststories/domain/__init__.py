"""Domain layer: value objects, ranking rules and exceptions."""
