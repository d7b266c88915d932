"""Deployment orchestrator for the Seed vault contracts."""

__version__ = "0.1.0"
