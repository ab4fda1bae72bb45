"""A terminal road-crossing arcade game and two shape-factory demos."""

__version__ = "1.0.0"