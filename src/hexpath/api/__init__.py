"""HTTP query surface for hexpath maps."""
