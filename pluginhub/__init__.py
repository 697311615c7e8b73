"""
pluginhub Application Package

Directory Structure:
├── routers/           # FastAPI route handlers
├── schemas/           # Pydantic models for API requests/responses
│   └── api_schemas.py # Preview node and runtime descriptor shapes
├── domain/            # Identifier codec, graph classifier, socket derivation
├── application/       # Child app resolver and node builders
├── db/                # Async SQLAlchemy document store (apps, versions, customizations)
├── registry/          # Static system plugin registry
└── config.py          # Application configuration

Child App Types:
1. **Personal**: team-owned apps, addressed by their bare app id
2. **Community / Commercial**: registry entries, addressed by their prefixed id
   (``community-<id>``, ``commercial-<id>``); an entry may be backed by a team app

Each resolved child app becomes either a preview node for the workflow editor
or a runtime descriptor for the execution engine.
"""
