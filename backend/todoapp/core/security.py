from typing import Optional

# Every authenticated request acts as this user, whichever account logged in.
DEMO_USER_ID = 1

SCHEME = "Bearer"


def issue_token(accepted_token: str) -> str:
    if not accepted_token:
        raise ValueError("An accepted token must be configured")
    return accepted_token


def authorization_value(token: str) -> str:
    return f"{SCHEME} {token}"


def is_authorized(header: Optional[str], accepted_token: str) -> bool:
    if not header or not accepted_token:
        return False
    return header == authorization_value(accepted_token)
