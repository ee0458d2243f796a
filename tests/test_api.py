import pytest


# ── Helpers ──────────────────────────────────────────────────────────────────

async def _new_player(client, name="Ada"):
    resp = await client.post("/api/player/new", json={"name": name})
    assert resp.status_code == 200
    return resp.json()


async def _new_game(client, player_id):
    resp = await client.post("/api/game/new", json={"which_player_turn": player_id})
    assert resp.status_code == 200
    return resp.json()


# ── Tests ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "game": "lue-lue"}


@pytest.mark.asyncio
async def test_game_lifecycle(client):
    ada = await _new_player(client, "Ada")
    bob = await _new_player(client, "Bob")

    game = await _new_game(client, ada["id"])
    assert game["state"] == 3
    assert game["chat"]["game_id"] == game["id"]

    resp = await client.get(f"/api/game/{game['id']}")
    assert resp.status_code == 200
    assert resp.json()["which_player_turn"] == ada["id"]

    resp = await client.put("/api/game/update", json={"id": game["id"], "state": 0})
    assert resp.status_code == 200
    assert resp.json()["state"] == 0

    resp = await client.post(
        f"/api/game/{game['id']}/turn", json={"next_player_id": bob["id"]}
    )
    assert resp.status_code == 200
    assert resp.json()["round_number"] == 1
    assert resp.json()["which_player_turn"] == bob["id"]

    resp = await client.get("/api/game/list")
    assert resp.status_code == 200
    assert len(resp.json()) == 1

    resp = await client.delete(f"/api/game/{game['id']}")
    assert resp.status_code == 200
    resp = await client.get(f"/api/game/{game['id']}")
    assert resp.status_code == 404
    assert resp.json()["error"] == "DatabaseQueryError"


@pytest.mark.asyncio
async def test_update_game_without_changes(client):
    ada = await _new_player(client)
    game = await _new_game(client, ada["id"])

    resp = await client.put("/api/game/update", json={"id": game["id"]})
    assert resp.status_code == 400
    assert resp.json()["error"] == "ProcessError"


@pytest.mark.asyncio
async def test_two_games_with_same_turn_holder_conflict(client):
    ada = await _new_player(client)
    await _new_game(client, ada["id"])

    resp = await client.post("/api/game/new", json={"which_player_turn": ada["id"]})
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_turn_cannot_go_to_current_player(client):
    ada = await _new_player(client)
    game = await _new_game(client, ada["id"])

    resp = await client.post(
        f"/api/game/{game['id']}/turn", json={"next_player_id": ada["id"]}
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "BadClientRequest"


@pytest.mark.asyncio
async def test_chat_routes(client):
    ada = await _new_player(client)
    game = await _new_game(client, ada["id"])

    resp = await client.post(
        f"/api/game/{game['id']}/chat/messages",
        json={"player_id": ada["id"], "content": "hello"},
    )
    assert resp.status_code == 200
    assert resp.json()["content"] == "hello"

    resp = await client.post(
        f"/api/game/{game['id']}/chat/messages",
        json={"player_id": ada["id"], "content": ""},
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidMessageError"

    resp = await client.get(f"/api/game/{game['id']}/chat")
    assert resp.status_code == 200
    chat = resp.json()
    assert chat["number_of_messages"] == 1
    assert chat["messages"][0]["player_id"] == ada["id"]

    resp = await client.delete(f"/api/game/{game['id']}/chat/messages")
    assert resp.status_code == 200
    assert resp.json()["number_of_messages"] == 0


@pytest.mark.asyncio
async def test_cards_and_claims(client):
    ada = await _new_player(client)
    card_ids = []
    for card_type in (1, 1, 4):
        resp = await client.post(
            "/api/card/new", json={"card_type": card_type, "player_id": ada["id"]}
        )
        assert resp.status_code == 200
        card_ids.append(resp.json()["id"])

    resp = await client.get("/api/card/list", params={"player_id": ada["id"]})
    assert len(resp.json()) == 3

    resp = await client.post("/api/claim/new", json={
        "created_by": ada["id"],
        "cards": [{"id": card_id} for card_id in card_ids[:2]],
    })
    assert resp.status_code == 200
    claim = resp.json()
    assert claim["number_of_cards"] == 2

    resp = await client.get("/api/card/list", params={"claim_id": claim["id"]})
    assert sorted(c["id"] for c in resp.json()) == sorted(card_ids[:2])

    resp = await client.get(
        "/api/card/list", params={"claim_id": claim["id"], "player_id": ada["id"]}
    )
    assert resp.status_code == 400

    resp = await client.get("/api/claim/list", params={"player_id": ada["id"]})
    assert [c["id"] for c in resp.json()] == [claim["id"]]

    resp = await client.delete(f"/api/claim/{claim['id']}")
    assert resp.status_code == 200
    resp = await client.get(f"/api/card/{card_ids[0]}")
    assert resp.json()["claim_id"] is None


@pytest.mark.asyncio
async def test_claim_with_too_many_cards(client):
    ada = await _new_player(client)
    resp = await client.post("/api/claim/new", json={
        "created_by": ada["id"],
        "cards": [{"card_type": 0} for _ in range(5)],
    })
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_player_routes(client):
    ada = await _new_player(client)

    resp = await client.put("/api/player/update", json={"id": ada["id"], "score": 3})
    assert resp.status_code == 200
    assert resp.json()["score"] == 3

    resp = await client.get("/api/player/list")
    assert [p["name"] for p in resp.json()] == ["Ada"]

    resp = await client.delete(f"/api/player/{ada['id']}")
    assert resp.status_code == 200
    resp = await client.get(f"/api/player/{ada['id']}")
    assert resp.status_code == 404
