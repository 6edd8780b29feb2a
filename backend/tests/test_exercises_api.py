def test_create_and_list_sorted_by_name(client):
    for name in ("Squats", "Bench Press", "Deadlifts"):
        r = client.post("/api/exercises", json={"name": name})
        assert r.status_code == 200
        assert r.json()["name"] == name
    r = client.get("/api/exercises")
    assert r.status_code == 200
    assert [e["name"] for e in r.json()] == ["Bench Press", "Deadlifts", "Squats"]
    assert set(r.json()[0]) == {"id", "name"}

def test_create_trims_name(client):
    r = client.post("/api/exercises", json={"name": "  Pull Up  "})
    assert r.json()["name"] == "Pull Up"

def test_create_duplicate_is_409(client):
    assert client.post("/api/exercises", json={"name": "Squats"}).status_code == 200
    for dup in ("Squats", " squats ", "SQUATS"):
        assert client.post("/api/exercises", json={"name": dup}).status_code == 409
    assert len(client.get("/api/exercises").json()) == 1

def test_blank_name_is_400(client):
    assert client.post("/api/exercises", json={"name": "   "}).status_code == 400
    assert client.post("/api/exercises", json={}).status_code == 400

def test_exists(client):
    client.post("/api/exercises", json={"name": "Squats"})
    assert client.post("/api/exercises/exists", json={"name": " sQuAts"}).json() == {"exists": True}
    assert client.post("/api/exercises/exists", json={"name": "Dips"}).json() == {"exists": False}

def test_rename(client):
    ex = client.post("/api/exercises", json={"name": "Sqats"}).json()["id"]
    r = client.put(f"/api/exercises/{ex}", json={"name": "Squats"})
    assert r.status_code == 200
    assert r.json() == {"id": ex, "name": "Squats"}
    # renaming to a different casing of itself is fine
    assert client.put(f"/api/exercises/{ex}", json={"name": "squats"}).status_code == 200

def test_rename_to_taken_name_is_409(client):
    client.post("/api/exercises", json={"name": "Squats"})
    dips = client.post("/api/exercises", json={"name": "Dips"}).json()["id"]
    assert client.put(f"/api/exercises/{dips}", json={"name": "SQUATS"}).status_code == 409

def test_rename_missing_is_404(client):
    assert client.put("/api/exercises/999", json={"name": "X"}).status_code == 404

def test_delete_unused_exercise(client):
    ex = client.post("/api/exercises", json={"name": "Squats"}).json()["id"]
    assert client.get(f"/api/exercises/{ex}/count").json() == {"count": 0}
    assert client.delete(f"/api/exercises/{ex}").status_code == 200
    assert client.get(f"/api/exercises/{ex}/count").status_code == 404

def test_delete_used_exercise_is_409(client):
    ex = client.post("/api/exercises", json={"name": "Squats"}).json()["id"]
    wid = client.post("/api/workouts").json()["id"]
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 5, "weight": 60})
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 5, "weight": 60})

    assert client.get(f"/api/exercises/{ex}/count").json() == {"count": 2}
    assert client.delete(f"/api/exercises/{ex}").status_code == 409
    assert [e["id"] for e in client.get("/api/exercises").json()] == [ex]
