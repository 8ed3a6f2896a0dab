from fastapi import status


def test_list_emotions_sorted_by_type_then_name(seeded_client):
    response = seeded_client.get("/api/emotions")
    assert response.status_code == status.HTTP_200_OK
    emotions = response.json()["data"]
    assert len(emotions) == 15
    keys = [(e["type"], e["name"]) for e in emotions]
    assert keys == sorted(keys)
    assert set(emotions[0]) == {"id", "name", "type", "color"}


def test_list_emotions_empty_catalogue(client):
    response = client.get("/api/emotions")
    assert response.json() == {"success": True, "data": []}
