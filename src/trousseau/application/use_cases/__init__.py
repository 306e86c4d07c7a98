"""Application use cases."""

from trousseau.application.use_cases.generate_accounts import GenerateAccounts
from trousseau.application.use_cases.get_balance import GetBalance

__all__ = ["GenerateAccounts", "GetBalance"]
