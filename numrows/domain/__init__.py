"""Domain layer for the sorted rows table.

Call context:
    ``numrows.viewmodels`` and ``numrows.usecases`` import the value objects,
    the search helper and the error types from here.

Dependencies:
    Standard library only. No view-model, use-case or presentation imports.

Responsibilities:
    - Describe mutations as typed edits (insert/delete/initial).
    - Locate sorted insertion points with a binary search.
    - Define the errors and ports that cross layer boundaries.
"""
