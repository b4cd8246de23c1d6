import pytest
from fastapi.testclient import TestClient

from nuccalc import app as app_mod
from nuccalc.settings import Settings

client = TestClient(app_mod.app)


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    monkeypatch.setattr(app_mod, "load_settings", lambda: Settings(default_city="Vienna", max_yield_mt=60.0))


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_presets():
    assert len(client.get("/presets/weapons").json()) == 35
    cities = client.get("/presets/cities").json()
    assert cities[0]["name"] == "Amsterdam"
    keys = {b["key"] for b in client.get("/presets/burst-types").json()}
    assert keys == {"surface", "optimum", "low", "high"}


def test_optimal_heights():
    r = client.get("/optimal-heights", params={"yield_mt": 8.0})
    assert r.status_code == 200
    assert r.json()["combined_m"] == pytest.approx(400.0)
    assert client.get("/optimal-heights", params={"yield_mt": 0}).status_code == 422


def test_summary_with_weapon_preset_height():
    r = client.post("/effects/summary", json={"weapon": "Little Boy (US)", "burst": "preset", "city": "London"})
    assert r.status_code == 200
    body = r.json()
    assert body["scenario"]["height_m"] == 580.0
    assert body["blast"]["severe_radius_m"] == pytest.approx(464.6, rel=0.01)
    assert body["fallout"]["fallout_angle_deg"] == 360.0


def test_summary_defaults_city_and_custom_height():
    r = client.post("/effects/summary", json={"yield_mt": 1.0, "burst": "custom", "height_m": 9000, "wind_speed_kmh": 5})
    assert r.status_code == 200
    body = r.json()
    assert body["scenario"]["city"]["name"] == "Vienna"
    assert body["warnings"]


@pytest.mark.parametrize("payload, status", [
    ({"burst": "surface"}, 422),                                  # neither weapon nor yield
    ({"weapon": "W88", "yield_mt": 1.0}, 422),                    # both
    ({"yield_mt": 1.0, "burst": "preset"}, 422),                  # preset height without weapon
    ({"yield_mt": 1.0, "burst": "custom"}, 422),                  # custom without height
    ({"yield_mt": 75.0}, 422),                                    # above configured max
    ({"yield_mt": -1.0}, 422),
    ({"yield_mt": 1.0, "wind_speed_kmh": -3}, 422),
    ({"yield_mt": 1.0, "burst": "optimum", "height_m": 500}, 422),  # height only with custom
    ({"weapon": "W88", "burst": "preset", "height_m": 500}, 422),
    ({"weapon": "Death Star"}, 404),
    ({"yield_mt": 1.0, "city": "Atlantis"}, 404),
])
def test_summary_rejects_bad_requests(payload, status):
    assert client.post("/effects/summary", json=payload).status_code == status


def test_point_functions():
    r = client.get("/effects/overpressure", params={"distance_m": 1000, "yield_mt": 1.0})
    body = r.json()
    assert body["overpressure_pa"] > 101325.0
    assert body["overpressure_psi"] == pytest.approx(body["overpressure_pa"] / 6894.757)
    r = client.get("/effects/thermal-fluence", params={"distance_m": 2000, "yield_mt": 1.0, "height_m": 500})
    assert r.json()["fluence_jpm2"] > 0.0


@pytest.mark.parametrize("body", [
    '{"yield_mt": Infinity}',
    '{"yield_mt": 1.0, "wind_speed_kmh": Infinity}',
    '{"yield_mt": 1.0, "burst": "custom", "height_m": Infinity}',
    '{"yield_mt": NaN}',
])
def test_summary_rejects_non_finite_numbers(body):
    r = client.post("/effects/summary", content=body, headers={"Content-Type": "application/json"})
    assert r.status_code == 422


@pytest.mark.parametrize("path, params", [
    ("/optimal-heights", {"yield_mt": "inf"}),
    ("/effects/overpressure", {"distance_m": 1000, "yield_mt": "inf"}),
    ("/effects/overpressure", {"distance_m": "inf", "yield_mt": 1.0}),
    ("/effects/thermal-fluence", {"distance_m": 2000, "yield_mt": 1.0, "height_m": "inf"}),
    ("/effects/thermal-fluence", {"distance_m": "nan", "yield_mt": 1.0}),
])
def test_point_endpoints_reject_non_finite_numbers(path, params):
    assert client.get(path, params=params).status_code == 422
