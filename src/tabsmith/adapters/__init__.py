"""Adapters bridging HTML input, Typst output, and the system clipboard."""
