"""Core engine: ramp generation and plate solving."""
