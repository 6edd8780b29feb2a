def mk_exercise(client, name="Squats"):
    r = client.post("/api/exercises", json={"name": name})
    assert r.status_code == 200
    return r.json()["id"]

def mk_workout(client):
    r = client.post("/api/workouts")
    assert r.status_code == 200
    return r.json()["id"]

def test_create_workout_add_sets_and_read_back(client):
    ex = mk_exercise(client)
    wid = mk_workout(client)

    r = client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 5, "weight": 60, "note": "easy"})
    assert r.status_code == 200
    r = client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 3, "weight": 70})
    assert r.status_code == 200

    r = client.get(f"/api/workouts/{wid}/sets")
    assert r.status_code == 200
    sets = r.json()
    assert len(sets) == 2
    # most recent first
    assert sets[0]["repetitions"] == 3 and sets[1]["repetitions"] == 5
    assert sets[1]["note"] == "easy"
    assert sets[0]["note"] is None
    assert sets[0]["exerciseName"] == "Squats"
    assert isinstance(sets[0]["doneSecondsUnixEpoch"], int)

    r = client.get(f"/api/sets/{sets[1]['id']}")
    assert r.status_code == 200
    assert r.json() == sets[1]

def test_workout_list_is_most_recent_first(client):
    first = mk_workout(client)
    second = mk_workout(client)
    r = client.get("/api/workouts")
    assert r.status_code == 200
    ids = [w["id"] for w in r.json()]
    assert ids == [second, first]
    assert set(r.json()[0]) == {"id", "startSecondsUnixEpoch"}

def test_update_set(client):
    squats = mk_exercise(client, "Squats")
    dips = mk_exercise(client, "Dips")
    wid = mk_workout(client)
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": squats, "repetitions": 5, "weight": 60})
    set_id = client.get(f"/api/workouts/{wid}/sets").json()[0]["id"]
    before = client.get(f"/api/sets/{set_id}").json()

    r = client.put(f"/api/sets/{set_id}", json={"exerciseId": dips, "repetitions": 12, "weight": 0, "note": "  "})
    assert r.status_code == 200

    after = client.get(f"/api/sets/{set_id}").json()
    assert after["exerciseId"] == dips
    assert after["exerciseName"] == "Dips"
    assert after["repetitions"] == 12
    assert after["weight"] == 0
    assert after["note"] is None
    assert after["doneSecondsUnixEpoch"] == before["doneSecondsUnixEpoch"]

def test_delete_set(client):
    ex = mk_exercise(client)
    wid = mk_workout(client)
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 5, "weight": 60})
    set_id = client.get(f"/api/workouts/{wid}/sets").json()[0]["id"]

    assert client.delete(f"/api/sets/{set_id}").status_code == 200
    assert client.get(f"/api/sets/{set_id}").status_code == 404
    assert client.get(f"/api/workouts/{wid}/sets").json() == []

def test_delete_workout_cascades_sets(client):
    ex = mk_exercise(client)
    wid = mk_workout(client)
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 5, "weight": 60})
    set_id = client.get(f"/api/workouts/{wid}/sets").json()[0]["id"]

    assert client.delete(f"/api/workouts/{wid}").status_code == 200
    assert client.get(f"/api/workouts/{wid}/sets").status_code == 404
    assert client.get(f"/api/sets/{set_id}").status_code == 404
    # the exercise is free again
    assert client.get(f"/api/exercises/{ex}/count").json() == {"count": 0}

def test_recommendation_endpoint(client):
    squats = mk_exercise(client, "Squats")
    dips = mk_exercise(client, "Dips")
    wid = mk_workout(client)

    r = client.get(f"/api/workouts/{wid}/sets/recommendation")
    assert r.status_code == 200
    assert r.json() == {"exerciseId": -1, "repetitions": 0, "weight": 0}

    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": squats, "repetitions": 5, "weight": 50})
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": dips, "repetitions": 8, "weight": 20})

    r = client.get(f"/api/workouts/{wid}/sets/recommendation", params={"exerciseId": squats})
    assert r.json() == {"exerciseId": squats, "repetitions": 5, "weight": 50}

    r = client.get(f"/api/workouts/{wid}/sets/recommendation")
    assert r.json() == {"exerciseId": dips, "repetitions": 8, "weight": 20}

    # a new, empty workout starts like the last one did
    new_wid = mk_workout(client)
    r = client.get(f"/api/workouts/{new_wid}/sets/recommendation")
    assert r.json() == {"exerciseId": squats, "repetitions": 5, "weight": 50}

def test_statistics_endpoint(client):
    r = client.get("/api/statistics")
    assert r.status_code == 200
    assert r.json() == {
        "totalWorkouts": 0,
        "totalDurationSeconds": 0,
        "avgDurationSeconds": 0,
        "totalSets": 0,
        "totalReps": 0,
        "avgRepsPerSet": 0,
    }

    ex = mk_exercise(client)
    wid = mk_workout(client)
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 5, "weight": 60})
    client.post(f"/api/workouts/{wid}/sets", json={"exerciseId": ex, "repetitions": 6, "weight": 60})
    mk_workout(client)  # empty session, not counted

    body = client.get("/api/statistics").json()
    assert body["totalWorkouts"] == 1
    assert body["totalSets"] == 2
    assert body["totalReps"] == 11
    assert body["avgRepsPerSet"] == 5
    assert body["totalDurationSeconds"] >= 0
