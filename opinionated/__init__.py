"""Console survey system: user accounts, admin menus and binary survey files."""

__version__ = "0.1.0"