# greeter/registry/users.py

import logging
import re
import threading
from typing import Dict, List, Tuple

import email_validator
from email_validator import EmailNotValidError, validate_email

from greeter.models.users import Mailbox, User
from greeter.registry.errors import (
    DuplicateUser,
    InvalidEmail,
    InvalidFirstName,
    InvalidLastName,
    NoResultFound,
)

logger = logging.getLogger(__name__)

# Reserved names like localhost or .test are still valid mailbox syntax.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()

_NAME_ADDR = re.compile(
    r'\s*(?:"(?P<quoted>(?:[^"\\]|\\.)*)"|(?P<plain>[\w!#$%&\'*+\-/=?^`{|}~. ]*?))'
    r"\s*<(?P<address>[^<>]*)>\s*"
)


def parse_mailbox(raw: str) -> Mailbox:
    """
    Parse `raw` as a mailbox: either `local@domain` or `Display Name <local@domain>`.

    Only the syntax is checked; the address is stored as written.
    """
    name = None
    address = raw.strip()

    if "<" in raw:
        match = _NAME_ADDR.fullmatch(raw)
        if match is None:
            raise InvalidEmail(raw)
        if match.group("quoted") is not None:
            name = re.sub(r"\\(.)", r"\1", match.group("quoted"))
        else:
            name = match.group("plain").strip()
        address = match.group("address")

    try:
        validate_email(
            address,
            check_deliverability=False,
            globally_deliverable=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailNotValidError as exc:
        raise InvalidEmail(raw) from exc

    return Mailbox(address=address, name=name or None)

class UserRegistry:
    """
    In-memory, append-only list of users keyed by (first_name, last_name).

    Users are kept in insertion order; a dict index mirrors the list so
    lookups don't scan. Every public method takes the lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[User] = []
        self._by_name: Dict[Tuple[str, str], User] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def add_user(self, first_name: str, last_name: str, email: str) -> User:
        """
        Validate and append a new user.

        Checks run in a fixed order (first name, last name, duplicate, email)
        so the reported error is stable when several fields are bad.
        """
        if not first_name:
            raise InvalidFirstName(first_name)
        if not last_name:
            raise InvalidLastName(last_name)

        key = (first_name, last_name)

        with self._lock:
            if key in self._by_name:
                raise DuplicateUser(first_name, last_name)

            address = parse_mailbox(email)

            user = User(first_name=first_name, last_name=last_name, email=address)
            self._users.append(user)
            self._by_name[key] = user

        logger.debug("Added user %s %s", first_name, last_name)
        return user

    def get_user_by_name(self, first_name: str, last_name: str) -> User:
        with self._lock:
            user = self._by_name.get((first_name, last_name))

        if user is None:
            raise NoResultFound(first_name, last_name)
        return user

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users)
