__all__ = [
    # Client
    "Requests",
    "ClientConfig",
    "wait_for_confirmation",
    # Catalog
    "OPERATIONS",
    "OperationDescriptor",
    # Errors
    "BramblError",
    "ValidationError",
    "TransportError",
    "ProtocolError",
    "ConfirmationTimeout",
]

from loguru import logger

from .config import ClientConfig
from .polling import wait_for_confirmation
from .requests import Requests
from .rpc.errors import (
    BramblError,
    ConfirmationTimeout,
    ProtocolError,
    TransportError,
    ValidationError,
)
from .rpc.operations import OPERATIONS, OperationDescriptor

logger.disable("brambl")
