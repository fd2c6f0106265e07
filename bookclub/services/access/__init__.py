from .access_policy import POLICY, Identity, Operation, Role, authorize, required_role

__all__ = [
    "POLICY",
    "Identity",
    "Operation",
    "Role",
    "authorize",
    "required_role",
]
