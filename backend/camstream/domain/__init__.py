"""Domain Layer - entities and interfaces, no framework dependencies."""
