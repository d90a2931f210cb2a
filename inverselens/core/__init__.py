"""Core domain: analysis engine and exception hierarchy."""
