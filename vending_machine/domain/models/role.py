# Standard library imports
from enum import Enum


class Role(str, Enum):
    """Closed set of account roles. Fixed at user creation."""
    ADMIN = "ADMIN"
    BUYER = "BUYER"
    SELLER = "SELLER"

    def has(self, capability: "Capability") -> bool:
        """
        Check whether this role grants a capability.

        Every role is handled explicitly; a role added to the enum without
        a branch here fails loudly instead of silently denying or granting.
        """
        if self is Role.BUYER:
            return capability is Capability.IS_BUYER
        if self is Role.SELLER:
            return capability is Capability.IS_SELLER
        if self is Role.ADMIN:
            return False
        raise AssertionError(f"Unhandled role: {self!r}")


class Capability(str, Enum):
    """Route-level role requirements"""
    IS_BUYER = "IS_BUYER"
    IS_SELLER = "IS_SELLER"
