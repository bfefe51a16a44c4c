"""
Tests for the dough profile contract and profile handling

Covers:
- Validity of the JSON Schema itself
- Acceptance of valid records
- Detection of missing fields, wrong types, constraint violations
- DoughProfile: overrides, conversion to core inputs
- Load/save round trip through a file
"""

import json
import logging

import pytest
from jsonschema import ValidationError

from src.core.contracts import DoughProfileValidator, SchemaLoader, validate_dough_profile
from src.core.domain import YeastKind
from src.planner.profile import DoughProfile, load_profile, parse_profile, save_profile


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_profile():
    """Valid dough profile record."""
    return {
        "w": 280,
        "temp": 22.5,
        "yeast": "dry",
        "hydration": 0.7,
        "salt_per_kg": 25.0,
        "ball_weight": 260.0,
        "balls": 6,
        "total_hours": 24.0,
        "fridge_hours": 16.0,
        "warmup_hours": 3.0,
        "fridge_factor": 0.25,
        "start": "18:30",
    }


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchema:
    """Tests for the schema file"""

    def test_schema_loads(self):
        """The schema is a valid Draft 2020-12 schema"""
        schema = SchemaLoader().load_schema("dough_profile")
        assert schema["title"] == "Dough profile"

    def test_schema_cached(self):
        """Repeated loads return the cached dict"""
        loader = SchemaLoader()
        assert loader.load_schema("dough_profile") is loader.load_schema("dough_profile")

    def test_custom_schema_dir(self, tmp_path):
        """Schemas can come from another directory"""
        (tmp_path / "tiny.json").write_text(
            json.dumps({"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}),
            encoding="utf-8",
        )
        loader = SchemaLoader(tmp_path)
        assert loader.schema_dir == tmp_path
        assert loader.load_schema("tiny")["type"] == "object"

    def test_invalid_schema_rejected(self, tmp_path):
        """Schemas are meta-validated"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError, match="broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_missing_schema_dir(self, tmp_path):
        """A missing directory is reported at construction"""
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_unknown_schema(self):
        """Unknown names raise FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


class TestDoughProfileContract:
    """Tests for validate_dough_profile"""

    def test_valid(self, valid_profile):
        """A valid record passes"""
        validate_dough_profile(valid_profile)
        assert DoughProfileValidator().is_valid(valid_profile)

    def test_optional_fields(self, valid_profile):
        """start and yeast_percent may be null or missing"""
        valid_profile["start"] = None
        valid_profile["yeast_percent"] = None
        validate_dough_profile(valid_profile)

        del valid_profile["start"]
        del valid_profile["yeast_percent"]
        validate_dough_profile(valid_profile)

    def test_missing_required_field(self, valid_profile):
        """Every recipe field is required"""
        del valid_profile["hydration"]
        with pytest.raises(ValidationError, match="hydration"):
            validate_dough_profile(valid_profile)

    def test_unknown_yeast(self, valid_profile):
        """Yeast must be dry or fresh"""
        valid_profile["yeast"] = "sourdough"
        with pytest.raises(ValidationError):
            validate_dough_profile(valid_profile)

    def test_additional_property(self, valid_profile):
        """Unknown fields are rejected"""
        valid_profile["oven_temp"] = 450
        with pytest.raises(ValidationError):
            validate_dough_profile(valid_profile)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("w", 0),
            ("hydration", 0),
            ("hydration", 1.5),
            ("balls", 0),
            ("balls", 2.5),
            ("total_hours", 0),
            ("fridge_hours", -1),
            ("fridge_factor", 0),
            ("start", "25:00"),
            ("start", "7:30"),
        ],
    )
    def test_constraint_violations(self, valid_profile, field, value):
        """Out-of-range values are rejected"""
        valid_profile[field] = value
        with pytest.raises(ValidationError):
            validate_dough_profile(valid_profile)

    def test_iter_errors_reports_all(self, valid_profile):
        """All violations are reported"""
        valid_profile["w"] = -1
        valid_profile["balls"] = 0
        errors = list(DoughProfileValidator().iter_errors(valid_profile))
        assert len(errors) == 2

    def test_describe_errors(self, valid_profile):
        """Violations are named by field, sorted"""
        valid_profile["w"] = -1
        valid_profile["balls"] = 0
        messages = DoughProfileValidator().describe_errors(valid_profile)
        assert len(messages) == 2
        assert messages[0].startswith("balls: ")
        assert messages[1].startswith("w: ")

    def test_describe_missing_field(self, valid_profile):
        """Record-level violations have no field path"""
        del valid_profile["temp"]
        assert DoughProfileValidator().describe_errors(valid_profile) == [
            "(record): 'temp' is a required property"
        ]


# =============================================================================
# PROFILE MODEL
# =============================================================================


class TestDoughProfile:
    """Tests for DoughProfile"""

    def test_parse(self, valid_profile):
        """Schema-valid record becomes a profile"""
        profile = parse_profile(valid_profile)
        assert profile.yeast == YeastKind.DRY
        assert profile.balls == 6

    def test_to_inputs(self, valid_profile):
        """Profile splits into core value objects"""
        inputs = parse_profile(valid_profile).to_inputs()
        assert inputs.dough.total_dough_g() == pytest.approx(1560.0)
        assert inputs.dough.salt_per_kg == 25.0
        assert inputs.fermentation.fridge_hours == 16.0
        assert inputs.environment.temperature_c == 22.5
        assert inputs.strength.w == 280.0
        assert inputs.start == "18:30"

    def test_overrides_win(self, valid_profile):
        """Explicit overrides replace stored values"""
        profile = parse_profile(valid_profile).with_overrides(temp=28.0, yeast=YeastKind.FRESH)
        assert profile.temp == 28.0
        assert profile.yeast == YeastKind.FRESH
        assert profile.hydration == 0.7

    def test_none_overrides_ignored(self, valid_profile):
        """None means "not given" and keeps the stored value"""
        profile = parse_profile(valid_profile).with_overrides(temp=None, start=None)
        assert profile.temp == 22.5
        assert profile.start == "18:30"

    def test_unknown_override_rejected(self, valid_profile):
        """Typos in override names are errors"""
        with pytest.raises(ValueError, match="Unknown profile fields"):
            parse_profile(valid_profile).with_overrides(hydratoin=0.8)

    def test_override_still_validated(self, valid_profile):
        """Overrides go through model validation"""
        with pytest.raises(ValueError):
            parse_profile(valid_profile).with_overrides(hydration=2.0)

    def test_override_breaking_schedule_rejected(self, valid_profile):
        """The fridge schedule must still fit after overrides"""
        profile = parse_profile(valid_profile).with_overrides(total_hours=18.0)
        with pytest.raises(ValueError, match="warmup_hours"):
            profile.to_inputs()


class TestLoadSave:
    """Tests for load_profile / save_profile"""

    def test_round_trip(self, tmp_path, valid_profile):
        """A saved profile loads back unchanged"""
        path = tmp_path / "profile.json"
        original = parse_profile(valid_profile)
        save_profile(original, path)

        assert load_profile(path) == original

    def test_saved_file_is_pretty_json(self, tmp_path, valid_profile):
        """Written as indented JSON with the record's field names"""
        path = tmp_path / "profile.json"
        save_profile(parse_profile(valid_profile), path)

        text = path.read_text(encoding="utf-8")
        assert text.startswith("{\n  ")
        data = json.loads(text)
        assert data["yeast"] == "dry"
        assert data["ball_weight"] == 260.0

    def test_invalid_file_rejected(self, tmp_path, valid_profile):
        """Schema violations in a file are reported"""
        valid_profile["yeast"] = "wild"
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(valid_profile), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_profile(path)

    def test_invalid_record_logged(self, valid_profile, caplog):
        """Every violation is logged before the error propagates"""
        valid_profile["w"] = 0
        valid_profile["hydration"] = 2.0
        with caplog.at_level(logging.ERROR, logger="src.planner.profile"):
            with pytest.raises(ValidationError):
                parse_profile(valid_profile)
        assert len(caplog.records) == 2
        assert "hydration" in caplog.records[0].getMessage()

    def test_missing_file(self, tmp_path):
        """I/O errors propagate"""
        with pytest.raises(FileNotFoundError):
            load_profile(tmp_path / "missing.json")
