"""User interfaces for tabsmith."""
