"""Identifier types and pydantic models."""
