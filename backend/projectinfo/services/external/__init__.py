from . import (
    github_api,
    github_resolvers,
)

__all__ = [
    "github_api",
    "github_resolvers",
]
