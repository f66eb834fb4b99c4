"""
ozone_coin.services._shared.ports
=================================

*Ports* (hexagonal interfaces) that keep the service and API layers
independent from where classes and students are stored.

Modules
-------
- :mod:`class_store`:
    Defines :class:`~.ClassStore` and the process-local
    :class:`~.InMemoryClassStore` fallback.

Design Notes
------------
The durable adapter lives under ``ozone_coin.infra``; the backend is picked
once at application start (see :mod:`ozone_coin.core.extensions`).
"""

from __future__ import annotations

from .class_store import ClassStore, InMemoryClassStore

__all__ = ["ClassStore", "InMemoryClassStore"]
