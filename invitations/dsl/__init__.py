"""Configuration language models."""
