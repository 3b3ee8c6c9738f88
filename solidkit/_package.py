"""Package metadata and naming constants."""

PACKAGE_NAME = "solidkit"
__version__ = "1.0.0"
DESCRIPTION = "Executable lessons for the SOLID object-oriented design principles"

# Derived values
ENV_PREFIX = f"{PACKAGE_NAME.upper()}_"
