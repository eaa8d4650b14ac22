"""
Domain error taxonomy.

Every failure raised by use cases and repositories derives from
VendingMachineError so the API layer can translate it with a single mapping.
"""


class VendingMachineError(Exception):
    """Base class for all vending machine errors"""


class ValidationError(VendingMachineError, ValueError):
    """Malformed input (username, password, cost, deposit, coin, role, amount)"""


class InvalidCoinError(ValidationError):
    """Coin value outside the accepted denominations"""


class AuthenticationError(VendingMachineError):
    """Missing, invalid or expired credential or token"""


class AuthorizationError(VendingMachineError):
    """Authenticated principal lacks the role or ownership required"""


class NotFoundError(VendingMachineError):
    """Referenced user or product does not exist"""


class BusinessRuleError(VendingMachineError):
    """Well-formed request rejected by a business rule"""


class InsufficientStockError(BusinessRuleError):
    """Requested quantity exceeds the product's available amount"""


class InsufficientDepositError(BusinessRuleError):
    """Buyer's deposit does not cover the purchase"""


class StoreError(VendingMachineError):
    """Persistence failure; the enclosing transaction has been rolled back"""


class DepositFailedError(StoreError):
    """Deposit could not be persisted"""


class NoRowsAffectedError(StoreError):
    """A write that must touch a record touched none"""
