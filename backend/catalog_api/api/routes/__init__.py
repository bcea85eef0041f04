"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with a resource prefix and tags
    - The versioned prefix (settings.api_prefix) is applied at registration in main.py
    - Routes never contain query logic (delegate to services/ repositories)
"""
