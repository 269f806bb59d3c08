"""Hexagonal 2048: grid model, slide and merge rules, and a client for a remote move service."""

__version__ = "0.1.0"
