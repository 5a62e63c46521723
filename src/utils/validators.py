from email_validator import validate_email, EmailNotValidError


def validate_email_str(email: str) -> bool:
    try:
        # syntax only; the backend decides whether the account exists
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def validate_password(password: str) -> bool:
    return bool(password and password.strip())
