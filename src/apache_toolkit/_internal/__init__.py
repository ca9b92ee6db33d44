"""Apache toolkit internal modules. Not part of the public API."""
