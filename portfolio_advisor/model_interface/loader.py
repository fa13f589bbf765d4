import importlib, os
from .portfolio_model import AllocationModel

def load_model() -> AllocationModel:
    modpath = os.getenv("ALLOCATION_MODEL")
    if not modpath:
        from portfolio_advisor.model_impl.glide_path_model import GlidePathModel
        return GlidePathModel()
    if ":" not in modpath:
        raise ValueError(f"ALLOCATION_MODEL must look like 'package.module:factory', got {modpath!r}")
    mod, factory = modpath.split(":", 1)
    return getattr(importlib.import_module(mod), factory)()
