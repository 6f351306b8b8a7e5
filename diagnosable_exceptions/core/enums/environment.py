"""Runtime environment types.

Used by Settings to pick environment-specific behavior, mainly the log
renderer chosen by the logger composition root.

Environments:
- DEVELOPMENT: Local authoring of error documentation, human-readable logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration (catalog generation in pipelines), JSON logs
- PRODUCTION: Published catalog generation, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
