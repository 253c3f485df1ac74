"""Core primitives: the bounded buffer, numeric conversion and precision."""
