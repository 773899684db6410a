"""AWS provider implementation."""
