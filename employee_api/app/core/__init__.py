"""Configuration and logging shared across the application."""
