"""Database models for Task Service."""
