"""
Logged-in account identity.
"""

from pydantic import BaseModel


class AccountSession(BaseModel):
    account_id: str
    in_app_id: str = ""
