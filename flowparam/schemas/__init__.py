"""Packaged JSON schemas for flowparam configuration sections."""
