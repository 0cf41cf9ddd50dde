from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher:
    """PBKDF2-SHA256 hashing; ``iterations`` is the configured work factor."""

    def __init__(self, iterations: int) -> None:
        if iterations < 1:
            raise ValueError("iterations must be a positive integer")
        self.iterations = iterations

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=f"pbkdf2:sha256:{self.iterations}")

    def verify(self, password: str, password_hash: str) -> bool:
        return check_password_hash(password_hash, password)
