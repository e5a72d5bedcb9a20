"""Console helpers: progress indicator and logging setup."""
