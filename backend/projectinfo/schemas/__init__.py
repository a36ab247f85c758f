from . import project

__all__ = ["project"]
