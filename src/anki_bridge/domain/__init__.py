"""Domain layer: interfaces the client is written against."""
