"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with a resource prefix and tags;
      the versioned API prefix is applied in main.py from settings
    - Routes never contain persistence logic (delegate to services)
"""
