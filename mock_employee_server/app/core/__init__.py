"""Mock server configuration."""
