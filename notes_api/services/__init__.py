# Services package init
"""
Notes API — Services Layer
============================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - NoteService: validation and envelope wrapping for the five note operations
    - ServiceSuccess / ServiceFailure: the result union every operation returns
"""
