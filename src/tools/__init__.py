"""Command line and reporting helpers for the hybrid solver."""
