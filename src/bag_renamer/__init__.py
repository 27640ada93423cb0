"""Auto Bag Renamer: names sleeping bags after where they were placed."""

__version__ = "1.1.0"
