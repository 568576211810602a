"""link-titles — annotate bare link lists with their page titles."""

__version__ = "0.1.0"
