import pytest


def test_register_then_duplicate(client):
    resp = client.post("/register", json={"username": "ann@!"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}

    again = client.post("/register", json={"username": "ann@!"})
    assert again.status_code == 409
    assert again.json() == {"error": "User already exists"}


@pytest.mark.parametrize("body", [{"username": "alice"}, {"username": "a@b"}, {"username": 12345}, {}])
def test_register_rejects_invalid_usernames(client, body):
    resp = client.post("/register", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid username"}


def test_invalid_register_does_not_touch_storage(file_client, data_dir):
    file_client.post("/register", json={"username": "alice"})
    assert list(data_dir.glob("*.json")) == []


def test_signin_known_user(client):
    client.post("/register", json={"username": "bob_1"})
    resp = client.post("/signin", json={"username": "bob_1"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_signin_unknown_user(client):
    resp = client.post("/signin", json={"username": "ghost!"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_signin_invalid_username(client):
    resp = client.post("/signin", json={"username": "nosymbol"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid username"}
