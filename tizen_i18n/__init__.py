"""Read and write Tizen string-table resource files."""

__version__ = "0.3.0"
