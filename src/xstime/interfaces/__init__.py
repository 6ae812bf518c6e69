"""Interfaces (application boundary) for xstime.

Defines framework-free contracts (ABCs) that the parser depends on and that
adapters implement: offset resolvers and zone clocks.

Dependency rule: this package may only reference `xstime.domain` value
objects (for typing). It may be imported by `xstime.domain.parser`,
`xstime.adapters` and `xstime.entrypoints`.
"""
