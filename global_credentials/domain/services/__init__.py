"""Domain services - Stateless operations on domain objects."""

from .credential_normalizer import CredentialNormalizer
from .method_resolver import DEFAULT_RULES, MethodResolver, SelectionRule, pick_method

__all__ = [
    "DEFAULT_RULES",
    "CredentialNormalizer",
    "MethodResolver",
    "SelectionRule",
    "pick_method",
]
