"""Core modules for Task Service."""
