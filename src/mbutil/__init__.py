"""mbutil: small filesystem helpers for the multi-boot patcher."""

__version__ = "0.1.0"
