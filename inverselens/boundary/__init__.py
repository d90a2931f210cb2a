"""Boundary adapters: relational database and record stores."""
