"""Inbound adapters reading bank statement files."""
