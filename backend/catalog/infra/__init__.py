"""Infrastructure adapters implementing service ports."""
