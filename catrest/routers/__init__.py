"""
FastAPI routers, one module per resource.

Each module exposes a ``build_router(base_path)`` so the mount point comes
from configuration instead of being hard-coded.
"""
