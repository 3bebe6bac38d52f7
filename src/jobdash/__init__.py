"""jobdash: browse configured jobs in a split-pane terminal dashboard."""

__version__ = "0.1.0"
