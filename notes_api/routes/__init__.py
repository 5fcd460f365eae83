# Routes package init
"""
Notes API — API Routes Package
================================

Route Inventory:
    - notes.py:   GET    /notes          (list, newest first)
                  POST   /notes          (create)
                  GET    /notes/{id}     (get one)
                  PUT    /notes          (update / upsert)
                  DELETE /notes/{id}     (delete)
    - health.py:  GET    /health         (service health check)

Design Principle:
    Routes are THIN: they log the request, call NoteService and choose the
    status code for the envelope it returns. Business rules live in services.
"""
