"""solidkit - Root Package.

This package turns the five SOLID design principles into small, executable
lessons. Every lesson pairs a "problem" shape that breaks the principle with a
"solution" shape built from the same three pieces:

    - Capability: an abstraction declaring a minimal set of operations
    - Variant: one concrete, substitutable way of fulfilling a capability
    - Consumer: an object that receives a variant from the outside and
      drives a fixed sequence of operations against it

Key Components:
    - domain: capability contracts, consumers and the lesson domains
    - application: lesson catalog, lesson service and conformance checks
    - infrastructure: logging, variant registry and dependency injection
    - config: typed configuration and configuration loading
    - cli: command line interface
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "solidkit maintainers"
__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> solidkit lessons list
    >>> solidkit run dip --variant postgres alice
    >>> solidkit check lsp --format table
"""
