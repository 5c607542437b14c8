"""
Shared Module

Code used by the API layer and by resource handler implementations:
- Handlers: ResourceHandler contract and RequestContext
- Schemas: Response envelope and health schemas
- Services: Bundled resource handler implementations
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/       ← Logging, exceptions
    ├── handlers/   ← Resource handler contract
    ├── schemas/    ← Pydantic schemas
    └── services/   ← Example handlers

Usage:
======
    from restwire.shared.handlers import ResourceHandler, RequestContext
    from restwire.shared.schemas import ResponseEnvelope
    from restwire.shared.core import logger, RestwireException
"""
