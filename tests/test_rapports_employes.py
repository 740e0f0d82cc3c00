# tests/test_rapports_employes.py

"""
Tests for employe-to-tache assignments and the rapports-with-employes aggregate.
"""

from datetime import date

import pytest


@pytest.fixture
def affectations(repos):
    """Employes 3 and 1 on taches of phase 1; employe 3 is on two of them."""
    repos.affectations.add(
        {"role": "Agent", "date_debut_affectation": date(2024, 3, 1), "date_fin_affectation": None,
         "id_tache": 1, "id_employe": 3}
    )
    repos.affectations.add(
        {"role": "Responsable", "date_debut_affectation": date(2024, 3, 2), "date_fin_affectation": None,
         "id_tache": 2, "id_employe": 1}
    )
    repos.affectations.add(
        {"role": "Agent", "date_debut_affectation": date(2024, 3, 4), "date_fin_affectation": date(2024, 3, 8),
         "id_tache": 2, "id_employe": 3}
    )
    repos.rapports.add(
        {"description": "Voirie avancée", "date_rapport": date(2024, 3, 5), "photo_url": None, "avancement": 40,
         "id_phase": 1, "validation": "en_attente", "commentaire": None}
    )
    repos.rapports.add(
        {"description": "Rien à signaler", "date_rapport": date(2024, 4, 2), "photo_url": None, "avancement": 0,
         "id_phase": 2, "validation": "en_attente", "commentaire": None}
    )
    return repos.affectations


def test_assignment_crud(section_client, repos):
    response = section_client.post(
        "/api/section/affectations",
        json={"role": "Agent", "date_debut_affectation": "2024-03-01", "id_tache": 1, "id_employe": 3},
    )
    assert response.status_code == 201
    created = response.json()
    assert created["date_fin_affectation"] is None

    response = section_client.put(
        f"/api/section/affectations/{created['id']}", json={"date_fin_affectation": "2024-03-03"}
    )
    assert response.status_code == 200
    assert response.json()["role"] == "Agent"

    assert section_client.delete(f"/api/section/affectations/{created['id']}").status_code == 204
    assert repos.affectations.rows == {}


def test_assignment_to_unknown_tache_or_employe_is_400(section_client, repos):
    response = section_client.post(
        "/api/section/affectations",
        json={"role": "Agent", "date_debut_affectation": "2024-03-01", "id_tache": 99, "id_employe": 98},
    )
    assert response.status_code == 400
    assert {c["champ"] for c in response.json()["champs"]} == {"id_tache", "id_employe"}
    assert repos.affectations.rows == {}


def test_assignment_ending_before_it_starts_is_400(section_client, affectations):
    response = section_client.post(
        "/api/section/affectations",
        json={"role": "Agent", "date_debut_affectation": "2024-03-05", "date_fin_affectation": "2024-03-01",
              "id_tache": 1, "id_employe": 3},
    )
    assert response.status_code == 400

    response = section_client.put("/api/section/affectations/3", json={"date_debut_affectation": "2024-03-09"})
    assert response.status_code == 400
    assert response.json()["champs"][0]["champ"] == "date_fin_affectation"
    assert affectations.rows[3]["date_debut_affectation"] == date(2024, 3, 4)


def test_assignments_are_forbidden_to_brigade_chiefs(brigade_client):
    assert brigade_client.get("/api/section/affectations").status_code == 403
    assert brigade_client.get("/api/section/rapports/avec-employes").status_code == 403


def test_rapports_with_employes(section_client, affectations):
    response = section_client.get("/api/section/rapports/avec-employes")
    assert response.status_code == 200
    rapports = response.json()
    assert [r["id"] for r in rapports] == [1, 2]

    first = rapports[0]
    assert first["avancement"] == 40
    assert first["phase"] == {"id": 1, "nom": "Préparation"}
    assert [t["id"] for t in first["taches"]] == [1, 2, 3]
    assert first["employes"] == [
        {"id": 3, "nom": "Petit", "prenom": "Marc", "fonction": "Agent"},
        {"id": 1, "nom": "Martin", "prenom": "Paul", "fonction": "Chef de brigade"},
    ]
    assert "password_hash" not in str(rapports)

    second = rapports[1]
    assert second["phase"] == {"id": 2, "nom": "Finitions"}
    assert second["taches"] == []
    assert second["employes"] == []


def test_rapports_with_employes_is_not_captured_by_the_id_route(section_client, affectations):
    assert section_client.get("/api/section/rapports/avec-employes").status_code == 200
    assert section_client.get("/api/section/rapports/1").json()["description"] == "Voirie avancée"


def test_rapport_whose_phase_is_gone_has_no_phase(section_client, affectations, repos):
    repos.phases.rows.pop(2)
    rapports = section_client.get("/api/section/rapports/avec-employes").json()
    assert rapports[1]["phase"] is None
    assert rapports[1]["employes"] == []


@pytest.mark.parametrize("depot", ["phases", "taches", "affectations", "employes"])
def test_rapports_with_employes_failure_returns_no_partial_result(section_client, affectations, repos, depot):
    getattr(repos, depot).fail = True
    response = section_client.get("/api/section/rapports/avec-employes")
    assert response.status_code == 500
    assert response.json() == {"error": "Erreur lors de la récupération des rapports"}
    assert "hunter2" not in response.text
