"""Application layer - departure board computation."""
