"""Organization-scoped messages."""
