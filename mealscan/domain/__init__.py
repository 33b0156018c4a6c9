"""Domain layer: entities, services and ports, free of network code."""
