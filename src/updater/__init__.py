"""updater - run a fixed step pipeline with timed progress reporting."""

__version__ = "1.0.0"
