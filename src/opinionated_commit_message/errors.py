"""Exceptions shared across the inspection pipeline."""


class ConfigurationError(Exception):
    """Invalid or unreadable configuration (e.g., a missing verbs file)."""

    pass


class InspectionError(Exception):
    """Internal defect detected while inspecting a message."""

    pass
