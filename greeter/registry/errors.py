# greeter/registry/errors.py


class UserRegistryError(Exception):
    """Base class for everything the user registry raises."""


class InvalidFirstName(UserRegistryError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid first name: {value!r}")


class InvalidLastName(UserRegistryError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid last name: {value!r}")


class InvalidEmail(UserRegistryError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid email: {value}")


class DuplicateUser(UserRegistryError):
    def __init__(self, first_name: str, last_name: str):
        self.first_name = first_name
        self.last_name = last_name
        super().__init__("user already exists")


class NoResultFound(UserRegistryError, LookupError):
    def __init__(self, first_name: str = "", last_name: str = ""):
        self.first_name = first_name
        self.last_name = last_name
        super().__init__("no result found")
