"""
Restwire

Generic REST resource-handler routing: plug in a handler that knows how to
create, read, update and delete one kind of object, get versioned JSON
endpoints with a uniform response envelope.

Package Structure:
==================
    restwire/
    ├── api/        ← FastAPI application, dispatcher, registrar
    ├── shared/     ← Handler contract, schemas, logging, exceptions
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn restwire.api.main:app --reload
"""
