"""Infrastructure adapters: bundled and on-disk fixture data."""
