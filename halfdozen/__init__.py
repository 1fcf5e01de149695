"""ABOUTME: Package root for halfdozen.
ABOUTME: Generation-aware type effectiveness engine for Pokemon team building."""

__version__ = "0.1.0"
