"""Domain models for icocheck."""
