"""
API Module

FastAPI application, resource dispatch and route registration.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── registrar.py      ← Binds a resource handler to CRUD routes
    ├── dispatcher.py     ← Request → handler call → envelope pipeline
    ├── formats.py        ← ?format= registry
    ├── handlers/         ← Health routes
    └── middleware/       ← Exception handlers

Usage:
======
    from restwire.api.registrar import register_resource_handler
    from restwire.api.main import app, create_application
"""
