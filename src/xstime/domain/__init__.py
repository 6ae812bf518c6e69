"""Domain layer for xstime.

Contains the value objects (time of day, UTC offset, offset time), the error
hierarchy and the ``xs:time`` lexical parser/formatter. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `xstime.adapters` or `xstime.entrypoints`.
"""
