"""Domain layer - Pure business logic.

Structure:
- entities/: Account entity and its lifecycle rules
- enums/: Account status, role and token purpose
- protocols/: Ports (repositories, hasher, JWT signer, event bus, logger)
- events/: Domain events (things that happened in the credential lifecycle)
- validators/ and types.py: Shared input validation

The domain layer has no framework or infrastructure dependencies beyond
pydantic for the Annotated input types.
"""
