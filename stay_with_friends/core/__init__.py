"""Core domain layer: validation, dates, availability matching and persistence."""
