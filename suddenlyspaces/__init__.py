"""SuddenlySpaces: property listings, tenant applications and owner dashboards."""

__version__ = "0.1.0"
