"""Domain layer: value objects, residences, bookings, error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from parsing, services, commands, or config.
"""
