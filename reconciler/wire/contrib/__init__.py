"""
Contrib — framework integrations. Access integrations via submodules.

    from reconciler.wire.contrib import fastapi
    # app = fastapi.from_application(Application())
"""

from . import fastapi

__all__ = ("fastapi",)
