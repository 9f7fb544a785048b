# greeter/models/users.py

from typing import Optional

from pydantic import BaseModel


class Mailbox(BaseModel):
    # Address text exactly as given (no case folding or normalization)
    address: str
    name: Optional[str] = None

    class Config:
        frozen = True

    def __str__(self) -> str:
        if self.name:
            return f'"{self.name}" <{self.address}>'
        return f"<{self.address}>"


class User(BaseModel):
    first_name: str
    last_name: str
    email: Mailbox

    class Config:
        frozen = True


class UserIn(BaseModel):
    first_name: str = ""
    last_name: str = ""
    # Raw mailbox text; the registry parses it after the name checks.
    email: str = ""


class UserOut(BaseModel):
    first_name: str
    last_name: str
    email: str
    display_name: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email.address,
            display_name=user.email.name,
        )
