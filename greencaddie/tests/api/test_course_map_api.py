from __future__ import annotations


def test_course_options(client) -> None:
    response = client.get("/api/course-map/courses")
    assert response.status_code == 200
    assert [course["id"] for course in response.json()] == ["vale-da-pinta", "gramacho"]


def test_get_hole(client) -> None:
    response = client.get("/api/course-map/vale-da-pinta/holes/1")
    assert response.status_code == 200
    body = response.json()
    assert body["strokeIndex"] == 12
    assert body["yardages"]["white"] == 318
    assert body["greenDepth"] == 25
    assert body["imagePath"] == "/assets/courses/vale-da-pinta/holes/1.svg"


def test_unknown_course_and_hole(client) -> None:
    response = client.get("/api/course-map/nowhere/holes/1")
    assert response.status_code == 404
    assert response.json()["detail"] == "course_not_found"

    response = client.get("/api/course-map/gramacho/holes/19")
    assert response.status_code == 404
    assert response.json()["detail"] == "hole_not_found"


def test_ball_on_green_gets_putter(client) -> None:
    green = client.get("/api/course-map/gramacho/holes/3").json()["coordinates"]["green"]
    response = client.post(
        "/api/course-map/gramacho/holes/3/advice",
        json={"x": green["x"], "y": green["y"], "source": "manual"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "advice": {"remainingMeters": 0, "recommendedClub": "putter"}
    }


def test_ball_outside_image_is_rejected(client) -> None:
    response = client.post(
        "/api/course-map/gramacho/holes/3/advice",
        json={"x": 120, "y": 50},
    )
    assert response.status_code == 422
