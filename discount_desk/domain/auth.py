from dataclasses import dataclass


@dataclass(frozen=True)
class AdminIdentity:
    username: str = "admin"
    auth_method: str = "passcode"
