"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from health_calculator.api.app import create_app
from health_calculator.containers import AppContainer
from tests.conftest import InMemoryHistoryRepository


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calculate_calories(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/calories", json={"carbs": "50", "protein": 30, "fats": "20"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_calories"] == "500.0"
    assert data["carbs"] == {"calories": "200.0", "percentage": "40.0"}
    assert data["protein"] == {"calories": "120.0", "percentage": "24.0"}
    assert data["fats"] == {"calories": "180.0", "percentage": "36.0"}
    assert data["message"] == "Calories calculated successfully!"
    assert [slice_["label"] for slice_ in data["chart"]] == [
        "Carbohydrates",
        "Proteins",
        "Fats",
    ]
    assert data["chart"][0]["tooltip"] == "Carbohydrates: 200.0 cal (40.0%)"


def test_chart_skips_empty_components(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calories", json={"protein": "25"})

    chart = response.json()["chart"]
    assert len(chart) == 1
    assert chart[0]["label"] == "Proteins"
    assert chart[0]["color"] == "#00ff88"


def test_calories_all_zero_returns_validation_error(
    container: AppContainer, history_repository: InMemoryHistoryRepository
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calories", json={"carbs": "", "protein": "abc"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please enter at least one macronutrient value",
        "error": "all_zero",
    }
    assert history_repository.writes == []


def test_calories_negative_returns_validation_error(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/calories", json={"carbs": "-5"})

    assert response.status_code == 422
    assert response.json()["error"] == "negative"


def test_calculate_bmi(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/bmi",
        json={
            "weight": "154.324",
            "height": "175",
            "weight_unit": "lbs",
            "height_unit": "cm",
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "bmi": "22.9",
        "category": "Normal weight",
        "category_class": "normal",
        "message": "BMI calculated: Normal weight",
    }


def test_bmi_invalid_measurement(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/bmi", json={"weight": "0", "height": "1.8"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please enter valid weight and height values",
        "error": "invalid_measurement",
    }


def test_bmi_unknown_unit_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/bmi", json={"weight": "70", "height": "1.8", "weight_unit": "stone"}
    )

    assert response.status_code == 422


def test_history_empty(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/history")

    assert response.status_code == 200
    assert response.json() == {"results": [], "message": "No saved results yet"}


def test_history_lists_newest_first(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/calories", json={"carbs": "50", "protein": "30", "fats": "20"})
    client.post("/bmi", json={"weight": "70", "height": "1.75"})

    response = client.get("/history")

    results = response.json()["results"]
    assert [item["type"] for item in results] == ["bmi", "calorie"]
    assert results[0]["values"] == ["BMI: 22.9", "Normal weight", "70kg / 1.75m"]
    assert results[1]["values"] == [
        "500.0 cal",
        "50g carbs",
        "30g protein",
        "20g fats",
    ]
    assert results[0]["display_time"] == "2024-05-01 12:01"
    assert results[1]["record"]["totalCalories"] == 500


def test_clear_history_requires_confirmation(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/calories", json={"carbs": "10"})

    response = client.delete("/history")

    assert response.status_code == 400
    assert len(client.get("/history").json()["results"]) == 1


def test_clear_history(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/calories", json={"carbs": "10"})
    client.post("/bmi", json={"weight": "70", "height": "1.75"})

    response = client.delete("/history", params={"confirm": "true"})

    assert response.status_code == 200
    assert response.json()["message"] == "History cleared successfully"
    assert client.get("/history").json()["results"] == []


def test_write_failure_returns_server_error(
    container: AppContainer, history_repository: InMemoryHistoryRepository
) -> None:
    client = TestClient(create_app(container))
    history_repository.fail_writes = True

    save_response = client.post("/calories", json={"carbs": "10"})
    clear_response = client.delete("/history", params={"confirm": "true"})

    assert save_response.status_code == 500
    assert save_response.json() == {"detail": "Error saving result"}
    assert clear_response.status_code == 500
    assert clear_response.json() == {"detail": "Error clearing history"}


def test_corrupt_history_is_shown_as_empty(
    container: AppContainer, history_repository: InMemoryHistoryRepository
) -> None:
    client = TestClient(create_app(container))
    history_repository.corrupt_slots.update({"calorieHistory", "bmiHistory"})

    response = client.get("/history")

    assert response.status_code == 200
    assert response.json()["results"] == []


def test_unit_placeholders(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    weight = client.get("/units/weight/lbs/placeholder")
    height = client.get("/units/height/ft/placeholder")

    assert weight.json() == {"placeholder": "Enter weight in lbs"}
    assert height.json() == {"placeholder": "Enter height in feet"}
