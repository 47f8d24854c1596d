"""Forward git invocations into WSL, translating Windows paths both ways."""

__version__ = "0.1.0"
