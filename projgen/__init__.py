"""projgen — scaffold starter projects with the ecosystem's own generator."""

__version__ = "0.1.0"
