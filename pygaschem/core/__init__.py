"""Core data structures and the mechanism assembler."""
