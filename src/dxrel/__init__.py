"""dxrel: Git reference and commit-range model for release tooling."""

__version__ = "0.1.0"
