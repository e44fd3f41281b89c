# Routes package init
"""
Dinosaur Facts Backend — API Routes Package
============================================

Route Inventory:
    - pages.py:      GET /                      (bundled HTML client)
    - dinosaurs.py:  GET /api/dinosaurs         (list every fact)
                     GET /api/dinosaurs/{name}  (search facts by name)
    - health.py:     GET /health                (service health check)

Routes stay thin: they call FactService and map its result to a status
code and body. Query logic lives in the services package.
"""
