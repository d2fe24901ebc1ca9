"""Core FileKit value types and services."""
