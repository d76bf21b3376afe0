"""Infrastructure layer: cache and remote API adapters."""
