"""Test suite for diagnosable_exceptions.

Test structure:
- unit/: Unit tests, one module per layer component (test_<layer>_<component>.py)
- fixtures/: Importable modules declaring documented exceptions, scanned by
  the catalog discovery tests
"""
