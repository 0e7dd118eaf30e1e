"""wordcodec.core — Foundation layer.

Contains the word list loader, the error types, configuration loading,
CLI types and the report builder.
This module has NO dependencies on wordcodec.commands or wordcodec.registry.
Only stdlib and numpy are allowed here.
"""
