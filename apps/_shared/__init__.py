"""Shared kernel for the users and boards services."""
