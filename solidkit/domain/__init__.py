"""Domain layer: capability contracts, consumers and the lesson domains.

Subpackages:
    - base: Capability, Consumer and domain exceptions
    - cars: Single Responsibility and Open/Closed
    - payments: Liskov Substitution
    - printing: Interface Segregation
    - users: Dependency Inversion
"""
