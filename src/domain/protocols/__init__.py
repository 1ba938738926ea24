"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import SecretHasherProtocol, TokenRepository
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secret_hasher_protocol import SecretHasherProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.transaction_protocol import TransactionProtocol

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.token_repository import TokenRecordData, TokenRepository

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "SecretHasherProtocol",
    "TokenGenerationProtocol",
    "TransactionProtocol",
    # Repository protocols
    "AccountRepository",
    "TokenRecordData",
    "TokenRepository",
]
