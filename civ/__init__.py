"""ci-version - release version calculator for CI builds."""

__version__ = "0.1.0"
