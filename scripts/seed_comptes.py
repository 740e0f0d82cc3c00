"""Crée un chef de section et un chef de brigade (avec sa brigade) pour se connecter."""
import asyncio
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from gestion_brigades.core.database import AsyncSessionLocal, init_db
from gestion_brigades.core.security import hash_password
from gestion_brigades.models import Brigade, ChefBrigade, Employe, Utilisateur

PASSWORD_PLAIN = "brigades2024"

CHEF_SECTION = {"nom": "Chef de section", "email": "chef.section@brigades.local"}
BRIGADE = {"nom_brigade": "Brigade Nord", "lieu": "Secteur nord"}
CHEF_BRIGADE = {
    "nom": "Martin",
    "prenom": "Paul",
    "fonction": "Chef de brigade",
    "contact": "0600000001",
}


async def seed_comptes():
    await init_db()
    password_hash = hash_password(PASSWORD_PLAIN)
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(Utilisateur).where(Utilisateur.email == CHEF_SECTION["email"]))
        utilisateur = result.scalar_one_or_none()
        if not utilisateur:
            utilisateur = Utilisateur(**CHEF_SECTION, role="chef_section", password_hash=password_hash)
            session.add(utilisateur)
            await session.flush()
            print(f"  + Chef de section créé : {utilisateur.email} (id={utilisateur.id})")
        else:
            utilisateur.password_hash = password_hash
            print(f"  = Chef de section existant, mot de passe mis à jour : {utilisateur.email}")

        result = await session.execute(select(Brigade).where(Brigade.nom_brigade == BRIGADE["nom_brigade"]))
        brigade = result.scalar_one_or_none()
        if not brigade:
            brigade = Brigade(**BRIGADE)
            session.add(brigade)
            await session.flush()
            print(f"  + Brigade créée : {brigade.nom_brigade} (id={brigade.id})")

        result = await session.execute(select(Employe).where(Employe.contact == CHEF_BRIGADE["contact"]))
        employe = result.scalar_one_or_none()
        if not employe:
            employe = Employe(**CHEF_BRIGADE, password_hash=password_hash)
            session.add(employe)
            await session.flush()
            print(f"  + Employé créé : {employe.prenom} {employe.nom} (id={employe.id})")
        else:
            employe.password_hash = password_hash

        if await session.get(ChefBrigade, employe.id) is None:
            session.add(ChefBrigade(id_employe=employe.id, id_brigade=brigade.id, date_nomination=date.today()))
            print(f"  + {employe.prenom} {employe.nom} nommé chef de {brigade.nom_brigade}")

        await session.commit()

    print("Terminé. Mot de passe des comptes : " + PASSWORD_PLAIN)
    print(f"  - chef_section : {CHEF_SECTION['email']}")
    print(f"  - chef_brigade : {CHEF_BRIGADE['contact']} (ou l'id {employe.id})")


if __name__ == "__main__":
    asyncio.run(seed_comptes())
