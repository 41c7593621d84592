"""Static lookup tables for the identifier registry."""
