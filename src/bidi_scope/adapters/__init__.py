"""Host adapters for the hint controller."""
