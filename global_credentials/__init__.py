"""Read-only lookup of Catalyst Center global credentials."""
