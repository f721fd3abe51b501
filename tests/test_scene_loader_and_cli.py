"""
Tests for JSON scene loading and the surface report command.
"""

import io
import json
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

import pytest

# Add the platformtester package to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from platformtester.errors import SceneFormatError
from platformtester.scene.scene_loader import load_scene, scene_from_dict, solid_from_dict
from platformtester.scene.solids import ShapeKind
from platformtester.surface_report import main


SCENE = {
    "player": {"radius": 0.5, "height": 2.0, "jump_height": 3.0, "horizontal_speed": 5.0, "gravity": 10.0},
    "attached": ["start"],
    "solids": [
        {"name": "start", "shape": "box", "size": [4, 1, 1], "position": [0, -0.5, 0]},
        {"name": "landing", "shape": "box", "size": [4, 1, 1], "position": [10, -0.5, 0]},
        {"name": "sky", "shape": "box", "size": [4, 1, 1], "position": [10, 99.5, 0]},
        {"name": "rock", "shape": "mesh", "triangles": 64},
    ],
}


class TestSceneLoader(unittest.TestCase):
    def test_box_defaults(self):
        solid = solid_from_dict({"name": "crate"})

        self.assertEqual(solid.shape_kind, ShapeKind.BOX)
        self.assertEqual(solid.shape.size, (1.0, 1.0, 1.0))
        self.assertEqual(solid.layer, 0)
        self.assertTrue(solid.enabled)

    def test_transform_is_applied(self):
        solid = solid_from_dict({"size": [2, 2, 2], "position": [5, 1, 0], "scale": [2, 1, 1]})

        low, high = solid.depth_range()
        self.assertAlmostEqual(low, -1.0)
        self.assertAlmostEqual(high, 1.0)
        xs = [x for x, _ in solid.outline_xy()]
        self.assertAlmostEqual(min(xs), 3.0)
        self.assertAlmostEqual(max(xs), 7.0)

    def test_non_box_shapes(self):
        mesh = solid_from_dict({"shape": "mesh", "triangles": 12})
        sphere = solid_from_dict({"shape": "sphere"})

        self.assertEqual(mesh.shape_kind, ShapeKind.MESH)
        self.assertEqual(mesh.shape.triangle_count, 12)
        self.assertEqual(sphere.shape_kind, ShapeKind.OTHER)
        self.assertEqual(sphere.shape.kind_name, "sphere")

    def test_unnamed_solids_get_index_names(self):
        description = scene_from_dict({"solids": [{}, {}]})

        self.assertEqual([s.name for s in description.scene], ["solid_0", "solid_1"])
        self.assertIsNone(description.player)
        self.assertEqual(description.attached, [])

    def test_player_block_is_parsed(self):
        description = scene_from_dict(SCENE)

        self.assertEqual(description.player.jump_height, 3.0)
        self.assertEqual(description.player.slope_limit, 45.0)
        self.assertEqual(description.attached, ["start"])
        self.assertEqual(len(description.scene), 4)

    def test_bad_vector_rejected(self):
        with self.assertRaises(SceneFormatError):
            solid_from_dict({"size": [1, 2]})
        with self.assertRaises(SceneFormatError):
            solid_from_dict({"position": ["a", 0, 0]})

    def test_layer_out_of_range_rejected(self):
        with self.assertRaises(SceneFormatError):
            solid_from_dict({"layer": 32})

    def test_malformed_documents_rejected(self):
        for document in ([], {"solids": {}}, {"solids": [1]}, {"player": 3}, {"player": {"radius": "big"}}):
            with self.assertRaises(SceneFormatError, msg=repr(document)):
                scene_from_dict(document)


def write_json(directory, name, data):
    path = os.path.join(directory, name)
    with open(path, "w", encoding="utf-8") as f:
        if isinstance(data, str):
            f.write(data)
        else:
            json.dump(data, f)
    return path


class TestSurfaceReport(unittest.TestCase):
    """End-to-end runs of the report command."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def run_main(self, argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out, patch("sys.stderr", new_callable=io.StringIO) as err:
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_load_scene_from_file(self):
        path = write_json(self.tmp.name, "scene.json", SCENE)

        description = load_scene(path)

        self.assertEqual(description.scene.find("landing").name, "landing")

    def test_report_lists_reachable_faces(self):
        path = write_json(self.tmp.name, "scene.json", SCENE)

        code, out, _ = self.run_main([path])

        self.assertEqual(code, 0)
        self.assertIn("Walkable faces (3)", out)
        self.assertIn("Attached faces (1)", out)
        self.assertIn("Reachable faces (2)", out)

    def test_attached_override_and_unknown_name(self):
        path = write_json(self.tmp.name, "scene.json", SCENE)

        code, out, _ = self.run_main([path, "--attached", "nothing"])

        self.assertEqual(code, 0)
        self.assertIn("Walkable faces (3)", out)
        self.assertNotIn("Reachable faces", out)

    def test_layer_mask_option(self):
        data = json.loads(json.dumps(SCENE))
        data["solids"][2]["layer"] = 4
        path = write_json(self.tmp.name, "scene.json", data)

        code, out, _ = self.run_main([path, "--layer-mask", "0x1"])

        self.assertEqual(code, 0)
        self.assertIn("Walkable faces (2)", out)

    def test_render_writes_png(self):
        path = write_json(self.tmp.name, "scene.json", SCENE)
        image = os.path.join(self.tmp.name, "out.png")

        code, _, _ = self.run_main([path, "--render", image, "--width", "320", "--height", "200"])

        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(image))
        self.assertGreater(os.path.getsize(image), 0)

    def test_invalid_json_fails(self):
        path = write_json(self.tmp.name, "broken.json", "{not json")

        code, _, err = self.run_main([path])

        self.assertEqual(code, 1)
        self.assertIn("Could not load scene", err)

    def test_missing_file_fails(self):
        code, _, _ = self.run_main([os.path.join(self.tmp.name, "missing.json")])

        self.assertEqual(code, 1)

    def test_invalid_player_fails(self):
        data = json.loads(json.dumps(SCENE))
        data["player"]["radius"] = 0
        path = write_json(self.tmp.name, "scene.json", data)

        code, _, err = self.run_main([path])

        self.assertEqual(code, 1)
        self.assertIn("could not be computed", err)


@pytest.mark.parametrize("mask_text, expected", [("0xFFFFFFFF", 0xFFFFFFFF), ("5", 5), ("0b11", 3)])
def test_layer_mask_accepts_integer_literals(mask_text, expected):
    from platformtester.surface_report import build_parser

    args = build_parser().parse_args(["scene.json", "--layer-mask", mask_text])

    assert args.layer_mask == expected


if __name__ == "__main__":
    unittest.main()
