"""
Application package initializer.

The project is split into small layers: ``core`` holds configuration,
logging and the in‑memory storage; ``schemas`` defines the pydantic
records and payloads for each entity; ``services`` implements the
per‑entity operations over the storage; ``api`` maps HTTP routes onto
those services.

Nothing is imported here so that using the services or schemas does not
build the FastAPI application.  Import ``app`` or ``create_app`` from
``freelance_marketplace_api.app.main``.
"""
