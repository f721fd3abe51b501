"""
Tests for rebuilding, publishing and versioning the walkable surface catalog.
"""

import os
import sys
import unittest
from unittest.mock import Mock, patch

# Add the platformtester package to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from platformtester.config import AnalysisConfig
from platformtester.errors import StaleFaceSetError
from platformtester.geometry.transform import trs_matrix
from platformtester.player import PlayerParameters
from platformtester.scene.box_sweep_world import BoxSweepWorld
from platformtester.scene.scene_source import StaticScene
from platformtester.scene.solids import BoxShape, MeshShape, Solid
from platformtester.sinks import LoggingDiagnostics, RecordingVisualization
from platformtester.surfaces.face_sets import AttachmentSet
from platformtester.surfaces import surface_catalog
from platformtester.surfaces.surface_catalog import SurfaceCatalog


def box(name, center_x, center_y, width, height, layer=0, enabled=True):
    return Solid(
        name=name,
        shape=BoxShape(size=(width, height, 1.0)),
        transform=trs_matrix(position=(center_x, center_y, 0.0)),
        layer=layer,
        enabled=enabled,
    )


class FailingSweepWorld(BoxSweepWorld):
    """Box world whose sweeps fail while a given solid is being clipped."""

    def __init__(self, scene, failing_solid):
        super().__init__(scene)
        self.failing_solid = failing_solid

    def sweep(self, base, top, radius, direction, max_distance, layer_mask=0xFFFFFFFF):
        if not self.is_participating(self.failing_solid):
            raise RuntimeError("physics query failed")
        return super().sweep(base, top, radius, direction, max_distance, layer_mask)


class TestSurfaceCatalogRebuild(unittest.TestCase):
    def setUp(self):
        self.ground = box("ground", 0.0, -0.5, 10.0, 1.0)
        self.block = box("block", 0.0, 1.0, 2.0, 1.0)  # low ceiling over the middle
        self.scene = StaticScene([self.ground, self.block])
        self.sweeper = BoxSweepWorld(self.scene)
        self.diagnostics = LoggingDiagnostics()
        self.visualization = RecordingVisualization()
        self.catalog = SurfaceCatalog(self.diagnostics, self.visualization)
        self.player = PlayerParameters()

    def rebuild(self, player=None, config=None):
        return self.catalog.rebuild(self.scene, self.sweeper, player or self.player, config)

    def test_rebuild_clips_ground_and_keeps_block_top(self):
        self.assertTrue(self.rebuild())

        ground_faces = [f for f in self.catalog.faces if f.owner is self.ground]
        block_faces = [f for f in self.catalog.faces if f.owner is self.block]
        self.assertEqual(len(ground_faces), 2)
        self.assertEqual(len(block_faces), 1)
        self.assertAlmostEqual(block_faces[0].anchor[1], 1.5)
        self.assertEqual(len(self.catalog), 3)
        self.assertIs(self.catalog.player, self.player)
        self.assertEqual(self.diagnostics.messages, [])

    def test_rebuild_publishes_walkable_faces(self):
        self.rebuild()

        self.assertEqual(self.visualization.walkable, list(self.catalog.faces))
        self.assertEqual(self.visualization.publish_count, 1)

    def test_missing_player_keeps_previous_state(self):
        self.rebuild()
        faces = self.catalog.faces

        result = self.catalog.rebuild(self.scene, self.sweeper, None)

        self.assertFalse(result)
        self.assertIn("No player set in the walk checker!", self.diagnostics.messages)
        self.assertEqual(self.catalog.faces, faces)
        self.assertEqual(self.catalog.generation, 1)

    def test_invalid_player_is_rejected(self):
        result = self.rebuild(player=PlayerParameters(radius=0.0))

        self.assertFalse(result)
        self.assertEqual(len(self.diagnostics.messages), 1)
        self.assertIn("radius", self.diagnostics.messages[0])
        self.assertEqual(self.catalog.faces, ())
        self.assertIsNone(self.catalog.player)

    def test_unsupported_shape_warns_and_is_skipped(self):
        self.scene.add(Solid(name="rock", shape=MeshShape(triangle_count=40)))

        self.assertTrue(self.rebuild())

        self.assertEqual(len(self.catalog), 3)
        self.assertEqual(len(self.diagnostics.messages), 1)
        self.assertIn("rock", self.diagnostics.messages[0])

    def test_disabled_solid_contributes_nothing(self):
        self.block.enabled = False

        self.rebuild()

        self.assertEqual(len(self.catalog), 1)
        self.assertAlmostEqual(self.catalog.faces[0].extent, 10.0)

    def test_layer_mask_excludes_sources_and_obstructions(self):
        self.block.layer = 2
        self.sweeper.refresh()

        self.rebuild(config=AnalysisConfig(collision_layer_mask=0b1))

        self.assertEqual(len(self.catalog), 1)
        self.assertIs(self.catalog.faces[0].owner, self.ground)
        self.assertAlmostEqual(self.catalog.faces[0].extent, 10.0)

    def test_failed_sweep_skips_only_that_solid(self):
        self.sweeper = FailingSweepWorld(self.scene, self.block)

        self.assertTrue(self.rebuild())

        self.assertEqual([f.owner for f in self.catalog.faces], [self.ground, self.ground])
        self.assertEqual(len(self.diagnostics.messages), 1)
        self.assertIn("block", self.diagnostics.messages[0])
        self.assertTrue(self.sweeper.is_participating(self.block))

    def test_owner_participation_restored_after_rebuild(self):
        self.rebuild()

        self.assertTrue(self.sweeper.is_participating(self.ground))
        self.assertTrue(self.sweeper.is_participating(self.block))

    def test_negative_size_box_uses_size_magnitude(self):
        mirrored = Solid(
            name="mirrored",
            shape=BoxShape(size=(-4.0, 1.0, 1.0)),
            transform=trs_matrix(position=(20.0, -0.5, 0.0)),
        )
        self.scene.add(mirrored)

        self.assertTrue(self.rebuild())

        faces = [f for f in self.catalog.faces if f.owner is mirrored]
        self.assertEqual(len(faces), 1)
        self.assertAlmostEqual(faces[0].extent, 4.0)
        self.assertAlmostEqual(faces[0].anchor[1], 0.0)
        self.assertEqual(len(self.catalog), 4)
        self.assertEqual(self.diagnostics.messages, [])

    def test_failed_extraction_skips_only_that_solid(self):
        real_extract = surface_catalog.extract_faces

        def extract(solid, slope_limit):
            if solid is self.block:
                raise ValueError("face extent must be non-negative (got -4.0)")
            return real_extract(solid, slope_limit)

        with patch.object(surface_catalog, "extract_faces", side_effect=extract):
            self.assertTrue(self.rebuild())

        self.assertEqual([f.owner for f in self.catalog.faces], [self.ground, self.ground])
        self.assertEqual(len(self.diagnostics.messages), 1)
        self.assertIn("block", self.diagnostics.messages[0])
        self.assertIn("ValueError", self.diagnostics.messages[0])

    def test_rebuild_sees_moved_solid(self):
        self.rebuild()
        self.assertEqual(len([f for f in self.catalog.faces if f.owner is self.ground]), 2)

        self.block.transform = trs_matrix(position=(100.0, 1.0, 0.0))
        self.rebuild()

        ground_faces = [f for f in self.catalog.faces if f.owner is self.ground]
        self.assertEqual(len(ground_faces), 1)
        self.assertAlmostEqual(ground_faces[0].extent, 10.0)

    def test_rebuild_refreshes_sweep_service(self):
        self.sweeper.refresh = Mock()

        self.rebuild()

        self.sweeper.refresh.assert_called_once_with()


class TestSurfaceCatalogGenerations(unittest.TestCase):
    """Derived face sets are only valid for the generation they were built from."""

    def setUp(self):
        self.ground = box("ground", 0.0, -0.5, 10.0, 1.0)
        self.ledge = box("ledge", 8.0, 1.0, 2.0, 1.0)
        self.scene = StaticScene([self.ground, self.ledge])
        self.sweeper = BoxSweepWorld(self.scene)
        self.visualization = RecordingVisualization()
        self.catalog = SurfaceCatalog(visualization=self.visualization)
        self.catalog.rebuild(self.scene, self.sweeper, PlayerParameters())

    def test_generation_increments_on_rebuild_and_clear(self):
        self.assertEqual(self.catalog.generation, 1)

        self.catalog.rebuild(self.scene, self.sweeper, PlayerParameters())
        self.assertEqual(self.catalog.generation, 2)

        self.catalog.clear()
        self.assertEqual(self.catalog.generation, 3)
        self.assertEqual(len(self.catalog), 0)
        self.assertEqual(self.visualization.walkable, [])

    def test_attachment_set_selects_owner_faces(self):
        attachment = self.catalog.attachment_set([self.ledge])

        faces = self.catalog.resolve(attachment)

        self.assertEqual(len(faces), 1)
        self.assertIs(faces[0].owner, self.ledge)
        self.assertEqual(attachment.generation, self.catalog.generation)

    def test_attachment_set_ignores_unknown_owners(self):
        stranger = box("stranger", 0.0, 0.0, 1.0, 1.0)

        attachment = self.catalog.attachment_set([stranger])

        self.assertTrue(attachment.is_empty)

    def test_stale_set_cannot_be_resolved(self):
        attachment = self.catalog.attachment_set([self.ground])
        self.catalog.rebuild(self.scene, self.sweeper, PlayerParameters())

        self.assertFalse(self.catalog.is_current(attachment))
        with self.assertRaises(StaleFaceSetError) as ctx:
            self.catalog.resolve(attachment)
        self.assertEqual(ctx.exception.set_generation, 1)
        self.assertEqual(ctx.exception.catalog_generation, 2)

    def test_snapshot_pairs_generation_with_faces(self):
        generation, faces = self.catalog.snapshot()

        self.assertEqual(generation, self.catalog.generation)
        self.assertEqual(faces, self.catalog.faces)

    def test_set_from_future_generation_is_stale(self):
        self.assertFalse(self.catalog.is_current(AttachmentSet(generation=99, indices=(0,))))


if __name__ == "__main__":
    unittest.main()
