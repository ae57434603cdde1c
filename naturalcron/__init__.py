"""Build and validate cron expressions through a natural, human-readable API."""

__version__ = "0.1.0"
__all__ = ["builder", "interfaces", "schedules", "utils", "validators"]