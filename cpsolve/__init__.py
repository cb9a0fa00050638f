"""Solutions to classic competitive-programming problems: modular arithmetic,
number theory, range queries and graph algorithms, with a command line."""

__version__ = "0.1.0"