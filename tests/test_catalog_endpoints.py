from fastapi.testclient import TestClient


class TestLocations:
    def test_blank_query_returns_all_sorted(self, client: TestClient):
        response = client.get("/api/locations")
        assert response.status_code == 200

        names = [location["name"] for location in response.json()]
        assert len(names) == 12
        assert names == sorted(names)
        assert names[0] == "Austin, TX"

    def test_whitespace_query_returns_all(self, client: TestClient):
        assert len(client.get("/api/locations?query=%20%20").json()) == 12

    def test_prefix_match(self, client: TestClient):
        names = [loc["name"] for loc in client.get("/api/locations?query=San").json()]
        assert names == ["San Francisco, CA", "San Jose, CA"]

    def test_case_insensitive(self, client: TestClient):
        names = [loc["name"] for loc in client.get("/api/locations?query=nEW").json()]
        assert names == ["New York, NY"]

    def test_substring_match(self, client: TestClient):
        names = [loc["name"] for loc in client.get("/api/locations?query=toronto").json()]
        assert names == ["Greater Toronto Area (GTA), ON", "Toronto, ON"]

    def test_wildcards_are_literal(self, client: TestClient):
        assert client.get("/api/locations?query=%25").json() == []
        assert client.get("/api/locations?query=_").json() == []


class TestCars:
    def test_all_cars_cheapest_first(self, client: TestClient):
        cars = client.get("/api/cars").json()

        assert len(cars) == 32
        prices = [float(car["pricePerDay"]) for car in cars]
        assert prices == sorted(prices)
        assert cars[0]["model"] == "Nissan Versa"
        assert cars[0]["pricePerDay"] == "42.00"

    def test_filter_by_type(self, client: TestClient):
        cars = client.get("/api/cars?type=SUV").json()
        assert {car["model"] for car in cars} == {
            "Honda CR-V",
            "Toyota RAV4",
            "Mazda CX-5",
            "Chevrolet Suburban",
        }

    def test_all_types_means_no_filter(self, client: TestClient):
        assert len(client.get("/api/cars?type=All Types").json()) == 32

    def test_price_range_is_inclusive(self, client: TestClient):
        cars = client.get("/api/cars?minPrice=100&maxPrice=150").json()
        assert {car["model"] for car in cars} == {
            "Ford F-150",
            "Toyota Tundra",
            "Chevrolet Suburban",
            "Tesla Model 3",
            "Ford Mustang GT",
        }

    def test_inverted_price_range(self, client: TestClient):
        response = client.get("/api/cars?minPrice=200&maxPrice=100")
        assert response.status_code == 400

    def test_filter_by_location(self, client: TestClient):
        cars = client.get("/api/cars?locationId=1").json()
        assert [car["id"] for car in cars] == [1, 13, 25]

    def test_available_window_excludes_booked_cars(self, client: TestClient, book):
        book(5, "2024-02-01", "2024-02-05")

        window = "availableFrom=2024-02-03&availableTo=2024-02-04"
        sedans = client.get(f"/api/cars?type=Sedan&{window}").json()
        assert [car["id"] for car in sedans] == [6, 7, 8]

        later = client.get("/api/cars?type=Sedan&availableFrom=2024-02-05&availableTo=2024-02-07").json()
        assert 5 in [car["id"] for car in later]

    def test_available_window_needs_both_ends(self, client: TestClient):
        assert client.get("/api/cars?availableFrom=2024-02-03").status_code == 400
        assert client.get(
            "/api/cars?availableFrom=2024-02-05&availableTo=2024-02-03"
        ).status_code == 400

    def test_get_car(self, client: TestClient):
        response = client.get("/api/cars/5")
        assert response.status_code == 200
        assert response.json() == {
            "id": 5,
            "model": "Toyota Camry",
            "type": "Sedan",
            "pricePerDay": "65.00",
            "available": True,
            "locationId": 5,
            "imageUrl": None,
        }

    def test_unknown_car(self, client: TestClient):
        response = client.get("/api/cars/999")
        assert response.status_code == 404
        assert response.json()["code"] == "CAR_NOT_FOUND"

    def test_non_integer_id(self, client: TestClient):
        assert client.get("/api/cars/abc").status_code == 400
