"""Core configuration, logging, constants and exceptions."""
