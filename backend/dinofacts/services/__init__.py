# Services package init
"""
Dinosaur Facts Backend — Services Layer
========================================

Service Inventory:
    - RecordStore (abstract): read-only access to the external record store
    - SqlRecordStore: RecordStore over an async SQLAlchemy engine
    - FactService: list / search query handler returning FactQueryResult

Services are constructed once at startup (see main.lifespan) and injected
into routes through dinofacts.dependencies.
"""
