"""Configuration for installer option defaults."""
