"""Backend de gestion des brigades de maintenance."""
