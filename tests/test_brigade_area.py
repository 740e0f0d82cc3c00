# tests/test_brigade_area.py

"""
Tests for the brigade chief area: every read is scoped to the session's brigade.
"""

from gestion_brigades.core.roles import Role

from conftest import open_session


def test_taches_are_limited_to_own_brigade(brigade_client):
    response = brigade_client.get("/api/brigade/taches")
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [1, 2]


def test_tache_of_another_brigade_is_404(brigade_client):
    assert brigade_client.get("/api/brigade/taches/1").status_code == 200
    response = brigade_client.get("/api/brigade/taches/3")
    assert response.status_code == 404
    assert response.json() == {"error": "Tâche introuvable"}


def test_equipes_are_limited_to_own_brigade(brigade_client):
    response = brigade_client.get("/api/brigade/equipes")
    assert response.status_code == 200
    assert {e["nom_equipe"] for e in response.json()} == {"Voirie", "Éclairage"}


def test_phases_with_taches_only_contains_own_taches(brigade_client):
    phases = brigade_client.get("/api/brigade/phases/avec-taches").json()
    assert [p["nom"] for p in phases] == ["Préparation", "Finitions"]
    assert [t["id"] for t in phases[0]["taches"]] == [1, 2]
    assert phases[1]["taches"] == []


def test_submitted_rapport_starts_pending(brigade_client, repos):
    response = brigade_client.post(
        "/api/brigade/rapports",
        json={"description": "Nids-de-poule rebouchés", "date_rapport": "2024-03-03", "avancement": 100,
              "id_phase": 1},
    )
    assert response.status_code == 201
    rapport = response.json()
    assert rapport["validation"] == "en_attente"
    assert repos.rapports.rows[rapport["id"]]["validation"] == "en_attente"


def test_submitted_rapport_cannot_choose_its_validation(brigade_client, repos):
    response = brigade_client.post(
        "/api/brigade/rapports",
        json={"description": "R", "date_rapport": "2024-03-03", "avancement": 100, "id_phase": 1,
              "validation": "approuve"},
    )
    assert response.status_code == 400
    assert repos.rapports.rows == {}


def test_rapport_for_unknown_phase_is_400(brigade_client):
    response = brigade_client.post(
        "/api/brigade/rapports",
        json={"description": "R", "date_rapport": "2024-03-03", "avancement": 10, "id_phase": 99},
    )
    assert response.status_code == 400
    assert response.json()["champs"][0]["champ"] == "id_phase"


def test_material_request_notifies_the_section(brigade_client, section_client):
    response = brigade_client.post(
        "/api/brigade/materiels/demandes",
        json={"id_tache": 2, "materiels": [{"nom": "Ampoule LED", "quantite": 12}]},
    )
    assert response.status_code == 201
    assert response.json()["success"] is True

    notifications = section_client.get("/api/section/notifications").json()
    assert notifications[0]["id"] == response.json()["id_notification"]
    assert notifications[0]["titre"] == "Demande de matériel"
    assert "Ampoule LED (quantité: 12)" in notifications[0]["message"]
    assert notifications[0]["payload"]["id_brigade"] == 1


def test_material_request_for_another_brigades_tache_is_404(brigade_client, repos):
    response = brigade_client.post(
        "/api/brigade/materiels/demandes",
        json={"id_tache": 3, "materiels": [{"nom": "Sécateur", "quantite": 1}]},
    )
    assert response.status_code == 404
    assert repos.notifications.rows == {}


def test_material_request_without_items_is_400(brigade_client):
    response = brigade_client.post("/api/brigade/materiels/demandes", json={"id_tache": 2, "materiels": []})
    assert response.status_code == 400


def test_brigade_session_without_brigade_is_forbidden(app, store):
    orphan = open_session(app, store, Role.CHEF_BRIGADE, "9")
    response = orphan.get("/api/brigade/taches")
    assert response.status_code == 403
    assert response.json() == {"error": "Aucune brigade associée à cette session"}
