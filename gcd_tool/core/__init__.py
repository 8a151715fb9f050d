"""gcd_tool.core — Foundation layer.

Contains the type definitions, the Euclid reducer, the number parser,
configuration loading and the report builder.
This module has NO dependencies on gcd_tool.__main__.
Only stdlib and numpy are allowed here.
"""
