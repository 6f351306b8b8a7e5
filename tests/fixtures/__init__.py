"""Test fixtures: importable modules declaring documented exceptions."""
