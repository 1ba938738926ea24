"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- persistence/: SQLAlchemy models, database manager, repositories
- security/: bcrypt secret hashing and JWT signing
- events/: In-memory event bus and subscribers
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
