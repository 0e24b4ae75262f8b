"""Label sync components.

- Settings loaded from flags, environment and `.env`
- Structured logging
- Template loading, reconciliation and execution against the GitHub REST API
"""
