"""Pull UI components, templates and themes from a remote registry into a project."""

__version__ = "0.1.0"
