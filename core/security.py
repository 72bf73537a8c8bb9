from passlib.context import CryptContext


# Fixed work factor so every seeding run hashes at the same cost
BCRYPT_ROUNDS = 12

pwd_context = CryptContext(schemes=["bcrypt", "argon2"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
