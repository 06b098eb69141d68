"""Domain layer: entities, repository interfaces and persisted field names."""
