"""package-assistant - unified update checks and changelogs for RPM package managers."""

__version__ = "0.1.0"
