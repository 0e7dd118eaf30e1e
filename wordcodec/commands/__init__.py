"""Command modules.

Every .py file in this package that defines a `command` object is
registered by wordcodec.registry.discover(). Modules starting with an
underscore are skipped.
"""
