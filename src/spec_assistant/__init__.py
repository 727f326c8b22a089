"""Construction specification chat assistant."""
