"""Starter .dxrel.toml template."""

DEFAULT_TOML = """\
# dxrel configuration
version = "1.0"

[range]
# from = "v1.0.0"   # exclusive lower bound; empty = beginning of history
to = "HEAD"         # inclusive upper bound

[output]
format = "text"     # text | json | yaml
"""
