"""Infrastructure: map file loading."""
