"""Core building blocks: configuration, codes, errors and logging."""
