"""NaijaMed Atlas: literature-grounded answers about Nigerian traditional medicine."""

__version__ = "0.1.0"
