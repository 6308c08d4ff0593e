"""Create ASCII art memes from built-in templates, from the command line or as a library."""

__version__ = "0.1.0"