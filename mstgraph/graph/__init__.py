"""Graph representation and graph algorithms."""
