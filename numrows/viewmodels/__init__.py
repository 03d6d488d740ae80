"""ViewModel package for table state and command surfaces.

Call context:
    ``numrows/app/main.py`` and the table presenter import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types only. Use-case
    orchestration and view wiring remain outside.

Responsibilities:
    - Own the sorted rows and publish immutable snapshots with typed edits.
    - Hold validated runtime settings.
"""
