"""Entrypoints (inbound adapters) for xstime.

Expose the library to the outside world through the command line. Parse and
validate inputs, call the codec, and present results.
"""
