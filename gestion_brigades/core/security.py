"""Utilitaires de sécurité : hachage et vérification des mots de passe."""
import bcrypt


def hash_password(plain_password: str) -> str:
    """Génère le hash bcrypt du mot de passe en clair."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Vérifie si le mot de passe en clair correspond au hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Hash mal formé en base
        return False
