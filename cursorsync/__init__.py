"""Keep a project's .cursor rules, skills and commands in sync with a remote Git repository."""

__version__ = "0.3.1"