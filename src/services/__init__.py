"""Services package."""
from src.services import (
    policy_service,
    project_scope_service,
    user_directory,
    user_store,
)

__all__ = [
    "policy_service",
    "project_scope_service",
    "user_directory",
    "user_store",
]
