"""Shared utilities: id generation, datetime helpers."""
