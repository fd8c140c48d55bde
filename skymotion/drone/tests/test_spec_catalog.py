# skymotion/drone/tests/test_spec_catalog.py
import json

import pytest

from skymotion.drone.data_models import DEFAULT_DRONE_SPEC, DroneSpec
from skymotion.drone.exceptions import SpecConfigurationError
from skymotion.drone.spec_catalog import DroneSpecCatalog, load_drone_specs

CATALOG = {
    "survey-quad": {"mass": 2.5, "batteryCapacity": 90, "hoverPower": 140},
    "heavy-lift": {"mass": 12.0, "max_payload": 8.0, "max_wind_speed": 12.0}
}

@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "drones.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path

def test_default_always_present():
    catalog = DroneSpecCatalog()
    assert "default" in catalog
    assert catalog.get("default") is DEFAULT_DRONE_SPEC

def test_unknown_name_falls_back_to_default():
    assert DroneSpecCatalog().get("no-such-drone") is DEFAULT_DRONE_SPEC

def test_register_rejects_non_spec():
    with pytest.raises(SpecConfigurationError):
        DroneSpecCatalog().register("bad", {"mass": 1})

def test_load_from_json(catalog_file):
    catalog = load_drone_specs(catalog_file)

    assert catalog.names() == ["default", "heavy-lift", "survey-quad"]
    survey = catalog.get("survey-quad")
    assert survey.mass == 2.5
    assert survey.battery_capacity == 90
    assert survey.drag_area == DEFAULT_DRONE_SPEC.drag_area
    assert catalog.get("heavy-lift").max_wind_speed == 12.0

def test_specs_are_shared_instances(catalog_file):
    catalog = DroneSpecCatalog.from_json(catalog_file)
    assert catalog.get("heavy-lift") is catalog.get("heavy-lift")
    assert isinstance(catalog.get("heavy-lift"), DroneSpec)

def test_missing_file(tmp_path):
    with pytest.raises(SpecConfigurationError):
        load_drone_specs(tmp_path / "missing.json")

def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SpecConfigurationError) as excinfo:
        load_drone_specs(path)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

def test_top_level_must_be_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SpecConfigurationError):
        load_drone_specs(path)

def test_invalid_entry_value(tmp_path):
    path = tmp_path / "neg.json"
    path.write_text(json.dumps({"bad": {"hover_power": -5}}), encoding="utf-8")
    with pytest.raises(SpecConfigurationError):
        load_drone_specs(path)
