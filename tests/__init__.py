"""Тести cg2q."""
