"""Quiz book page-configuration generator and runtime lookup."""

__version__ = "0.1.0"
