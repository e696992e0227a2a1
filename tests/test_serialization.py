"""Tests for panel document import/export and model editing helpers."""

from __future__ import annotations

import json
import unittest

from panelgen.catalog.models import FeatureType, FrameName
from panelgen.errors import (
    IndexOutOfRange, MalformedImportDocument, UnknownFeatureType, UnknownFrameName,
)
from panelgen.panel.models import Feature, PanelModel, Position
from panelgen.panel.serialization import dump_model, load_model, model_to_dict, parse_model
from tests.panel_fixture import make_led_panel, make_mixed_panel


class TestExport(unittest.TestCase):

    def test_reference_panel(self):
        self.assertEqual(model_to_dict(make_led_panel()), {
            "vp": 3,
            "hp": 8,
            "holes": ["tl", "br"],
            "features": [
                {"type": "led", "size": 4.0,
                 "position": {"x": 0, "y": 0, "relative_to": "center"}},
            ],
        })

    def test_fractional_hp(self):
        self.assertEqual(model_to_dict(PanelModel(hp_index=1))["hp"], 1.5)

    def test_string_fields_normalised(self):
        model = PanelModel(features=(Feature("slidepot", 20, Position(1, 2, "topleft")),))
        feature = model_to_dict(model)["features"][0]
        self.assertEqual(feature["type"], "slide_pot")
        self.assertEqual(feature["position"]["relative_to"], "topleft")

    def test_dump_is_json(self):
        data = json.loads(dump_model(make_mixed_panel()))
        self.assertEqual(len(data["features"]), 5)

    def test_bad_index(self):
        with self.assertRaises(IndexOutOfRange):
            model_to_dict(PanelModel(vp_index=9))


class TestRoundTrip(unittest.TestCase):

    def test_mixed_panel(self):
        model = make_mixed_panel()
        self.assertEqual(parse_model(model_to_dict(model)), model)

    def test_through_json_text(self):
        model = PanelModel(
            vp_index=3, hp_index=1, holes_index=4,
            features=(
                Feature(FeatureType.SLIDE_POT, 45, Position(-2.5, 10, FrameName.BOTTOM_RIGHT)),
                Feature(FeatureType.PATCH_POINT, 6.35, Position(0, 0, FrameName.TOP_LEFT)),
            ),
        )
        self.assertEqual(load_model(dump_model(model)), model)

    def test_first_matching_row_wins(self):
        # Both 1U rows export as vp=1; import picks the first one
        model = PanelModel(vp_index=1)
        self.assertEqual(parse_model(model_to_dict(model)).vp_index, 0)


class TestImportFallbacks(unittest.TestCase):

    def setUp(self):
        self.current = PanelModel(vp_index=3, hp_index=10, holes_index=2)

    def test_unmatched_values_keep_current(self):
        model = parse_model(
            {"vp": 7, "hp": 9, "holes": ["tl"], "features": []}, self.current,
        )
        self.assertEqual((model.vp_index, model.hp_index, model.holes_index), (3, 10, 2))

    def test_missing_values_keep_current(self):
        model = parse_model({"features": []}, self.current)
        self.assertEqual((model.vp_index, model.hp_index, model.holes_index), (3, 10, 2))

    def test_index_zero_is_a_match(self):
        model = parse_model({"vp": 1, "hp": 1, "holes": ["tl", "br"], "features": []}, self.current)
        self.assertEqual((model.vp_index, model.hp_index, model.holes_index), (0, 0, 0))

    def test_non_string_hole_keys_keep_current(self):
        model = parse_model({"holes": [["tl"], ["br"]], "features": []}, self.current)
        self.assertEqual(model.holes_index, 2)
        model = parse_model({"holes": [{"tl": 1}, 3], "features": []}, self.current)
        self.assertEqual(model.holes_index, 2)

    def test_default_current_model(self):
        model = parse_model({"features": []})
        self.assertEqual(model, PanelModel())


class TestImportFeatures(unittest.TestCase):

    def _one(self, raw: dict) -> Feature:
        return parse_model({"features": [raw]}).features[0]

    def test_feature_without_type_dropped(self):
        model = parse_model({"features": [
            {"size": 4, "position": {"x": 1, "y": 2, "relative_to": "center"}},
            {"type": "", "size": 4},
            {"type": "led", "size": 4},
        ]})
        self.assertEqual(len(model.features), 1)
        self.assertEqual(model.features[0].type, FeatureType.LED)

    def test_defaults_filled(self):
        f = self._one({"type": "patch_point"})
        self.assertEqual(f.size, 3.5)
        self.assertEqual(f.position, Position(0.0, 0.0, FrameName.CENTER))

    def test_zero_size_uses_default(self):
        self.assertEqual(self._one({"type": "toggle_switch", "size": 0}).size, 8.0)

    def test_partial_position(self):
        f = self._one({"type": "led", "size": 2, "position": {"y": -5}})
        self.assertEqual(f.position, Position(0.0, -5.0, FrameName.CENTER))

    def test_numeric_strings_accepted(self):
        f = self._one({"type": "led", "size": "6", "position": {"x": "1.5"}})
        self.assertEqual(f.size, 6.0)
        self.assertEqual(f.position.x, 1.5)

    def test_camel_case_frame_key(self):
        f = self._one({"type": "led", "position": {"relativeTo": "bottomright"}})
        self.assertEqual(f.position.relative_to, FrameName.BOTTOM_RIGHT)

    def test_legacy_type_names(self):
        self.assertEqual(self._one({"type": "slidepot"}).type, FeatureType.SLIDE_POT)
        self.assertEqual(self._one({"type": "rotarypot"}).size, 6.0)

    def test_unknown_type_rejected(self):
        with self.assertRaises(UnknownFeatureType):
            self._one({"type": "theremin"})

    def test_unknown_frame_rejected(self):
        with self.assertRaises(UnknownFrameName):
            self._one({"type": "led", "position": {"relative_to": "middle"}})

    def test_non_numeric_rejected(self):
        with self.assertRaises(MalformedImportDocument):
            self._one({"type": "led", "position": {"x": "left"}})
        with self.assertRaises(MalformedImportDocument):
            self._one({"type": "led", "size": True})
        with self.assertRaises(MalformedImportDocument):
            self._one({"type": "led", "size": "nan"})
        with self.assertRaises(MalformedImportDocument):
            load_model('{"features": [{"type": "led", "size": 1' + "0" * 400 + "}]}")

    def test_negative_size_rejected(self):
        with self.assertRaises(MalformedImportDocument) as ctx:
            self._one({"type": "led", "size": -4})
        self.assertIn("features[0].size", ctx.exception.reason)
        with self.assertRaises(MalformedImportDocument):
            self._one({"type": "slide_pot", "size": "-20"})


class TestMalformedDocuments(unittest.TestCase):

    def test_missing_features(self):
        with self.assertRaises(MalformedImportDocument) as ctx:
            parse_model({"vp": 3, "hp": 8})
        self.assertIn("features", ctx.exception.reason)

    def test_features_not_a_list(self):
        with self.assertRaises(MalformedImportDocument):
            parse_model({"features": {"type": "led"}})

    def test_not_an_object(self):
        with self.assertRaises(MalformedImportDocument):
            parse_model([])

    def test_feature_not_an_object(self):
        with self.assertRaises(MalformedImportDocument):
            parse_model({"features": ["led"]})

    def test_position_not_an_object(self):
        with self.assertRaises(MalformedImportDocument):
            parse_model({"features": [{"type": "led", "position": [1, 2]}]})

    def test_invalid_json(self):
        with self.assertRaises(MalformedImportDocument):
            load_model("{\"features\": [")

    def test_is_a_value_error(self):
        with self.assertRaises(ValueError):
            load_model("null")


class TestModelEditing(unittest.TestCase):

    def test_with_feature(self):
        model = PanelModel().with_feature("slide_pot").with_feature(FeatureType.LED)
        self.assertEqual(
            model.features,
            (
                Feature(FeatureType.SLIDE_POT, 20, Position()),
                Feature(FeatureType.LED, 4, Position()),
            ),
        )

    def test_with_feature_unknown_type(self):
        with self.assertRaises(UnknownFeatureType):
            PanelModel().with_feature("theremin")

    def test_without_feature(self):
        model = make_mixed_panel()
        trimmed = model.without_feature(1)
        self.assertEqual(len(trimmed.features), 4)
        self.assertEqual(trimmed.features[1], model.features[2])
        self.assertEqual(len(model.features), 5)

    def test_without_feature_bad_index(self):
        with self.assertRaises(IndexOutOfRange) as ctx:
            PanelModel().without_feature(0)
        self.assertEqual(ctx.exception.field, "features")

    def test_features_coerced_to_tuple(self):
        model = PanelModel(features=[Feature(FeatureType.LED, 4)])
        self.assertIsInstance(model.features, tuple)
        self.assertIsInstance(model.replace(features=[]).features, tuple)
