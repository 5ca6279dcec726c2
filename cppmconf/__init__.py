"""Typed data model and helpers for TOML manifests of C++ projects."""

__version__ = "0.1.0"