"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and one handler per lifecycle flow
- services/: Token Issuer and Token Validator shared by handlers
- dtos/: Results passed back to the presentation layer

The application layer orchestrates domain logic and owns transaction
boundaries; it does not import infrastructure.
"""
