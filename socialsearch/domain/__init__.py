"""Domain: enums and exceptions independent of persistence."""
