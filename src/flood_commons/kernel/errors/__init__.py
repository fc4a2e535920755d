"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   └── InvalidRequestError
    ├── ApplicationError         (application.py)
    │   └── RequestFactoryError
    └── InfrastructureError      (infrastructure.py)
        └── SerializationError

Configuration errors live in :mod:`flood_commons.config.validation` and
derive from ``ApplicationError``.
"""

from flood_commons.kernel.errors.application import ApplicationError, RequestFactoryError
from flood_commons.kernel.errors.base import BaseError
from flood_commons.kernel.errors.domain import DomainError, InvalidRequestError, ValidationError
from flood_commons.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidRequestError",
    "RequestFactoryError",
    "SerializationError",
    "ValidationError",
]
