# tests/test_auth.py

"""
Tests for login, logout and the current-session endpoint.
"""

import pytest

from conftest import COOKIE, PASSWORD


def login(client, identifiant, role, mot_de_passe=PASSWORD):
    return client.post(
        "/api/auth/login",
        json={"identifiant": identifiant, "mot_de_passe": mot_de_passe, "role": role},
    )


def test_section_chief_logs_in_with_email_case_insensitively(client, store):
    response = login(client, "Chef.Section@Brigades.local", "chef_section")
    assert response.status_code == 200
    utilisateur = response.json()["utilisateur"]
    assert utilisateur["role"] == "chef_section"
    assert utilisateur["email"] == "chef.section@brigades.local"
    assert utilisateur["id"] == "1"

    cookie = response.headers["set-cookie"].lower()
    assert cookie.startswith(f"{COOKIE}=")
    assert "httponly" in cookie
    assert "path=/" in cookie
    assert len(store) == 1

    session = client.get("/api/auth/session")
    assert session.status_code == 200
    assert session.json()["utilisateur"] == utilisateur


@pytest.mark.parametrize("identifiant", ["1", "0600000001", " 0600000001 "])
def test_brigade_chief_logs_in_with_id_or_contact(client, identifiant):
    response = login(client, identifiant, "chef_brigade")
    assert response.status_code == 200
    utilisateur = response.json()["utilisateur"]
    assert utilisateur["role"] == "chef_brigade"
    assert utilisateur["id"] == "1"
    assert utilisateur["id_brigade"] == 1
    assert utilisateur["nom_brigade"] == "Brigade Nord"
    assert utilisateur["nom"] == "Paul Martin"

    # The session is scoped to that brigade
    taches = client.get("/api/brigade/taches").json()
    assert {t["id_brigade"] for t in taches} == {1}


def test_brigade_chief_contact_match_ignores_case(client):
    response = login(client, "LEA.DURAND@brigades.local", "chef_brigade")
    assert response.status_code == 200
    assert response.json()["utilisateur"]["id_brigade"] == 2


@pytest.mark.parametrize(
    "identifiant, role, mot_de_passe",
    [
        ("chef.section@brigades.local", "chef_section", "mauvais"),
        ("inconnu@brigades.local", "chef_section", "secret123"),
        ("chef.section@brigades.local", "chef_brigade", "secret123"),
        ("1", "chef_section", "secret123"),
        ("3", "chef_brigade", "secret123"),
        ("0600000003", "chef_brigade", "secret123"),
    ],
)
def test_invalid_credentials_are_401(client, store, identifiant, role, mot_de_passe):
    response = login(client, identifiant, role, mot_de_passe)
    assert response.status_code == 401
    assert response.json() == {"error": "Identifiants invalides"}
    assert "set-cookie" not in response.headers
    assert len(store) == 0


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"identifiant": "1", "mot_de_passe": "x"},
        {"identifiant": "1", "mot_de_passe": "x", "role": "administrateur"},
    ],
)
def test_malformed_login_is_400(client, body):
    response = client.post("/api/auth/login", json=body)
    assert response.status_code == 400
    assert "champs" in response.json()


def test_login_again_replaces_the_previous_session(client, store):
    login(client, "chef.section@brigades.local", "chef_section")
    first = client.cookies.get(COOKIE)
    login(client, "chef.section@brigades.local", "chef_section")
    second = client.cookies.get(COOKIE)
    assert first != second
    assert store.lookup(first) is None
    assert store.lookup(second) is not None
    assert len(store) == 1


def test_logout_invalidates_session_and_clears_cookie(client, store):
    login(client, "chef.section@brigades.local", "chef_section")
    token = client.cookies.get(COOKIE)

    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    cookie = response.headers["set-cookie"].lower()
    assert "max-age=0" in cookie
    assert "path=/" in cookie
    assert store.lookup(token) is None
    assert client.get("/api/auth/session").status_code == 401


def test_logout_without_session_still_succeeds(client):
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_session_of_a_deleted_subject_is_closed(brigade_client, store, repos):
    token = brigade_client.cookies.get(COOKIE)
    del repos.employes.rows[1]

    response = brigade_client.get("/api/auth/session")
    assert response.status_code == 401
    assert "max-age=0" in response.headers["set-cookie"].lower()
    assert store.lookup(token) is None


def test_deleting_an_employe_revokes_their_sessions(section_client, brigade_client):
    assert brigade_client.get("/api/brigade/taches").status_code == 200
    assert section_client.delete("/api/section/employes/1").status_code == 204
    assert brigade_client.get("/api/brigade/taches").status_code == 401


def test_revoking_a_nomination_revokes_the_chiefs_sessions(section_client, brigade_client):
    assert section_client.delete("/api/section/chefs-brigade/1").status_code == 204
    assert brigade_client.get("/api/brigade/taches").status_code == 401
    # The section chief is unaffected
    assert section_client.get("/api/section/brigades").status_code == 200
