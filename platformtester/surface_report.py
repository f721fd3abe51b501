#!/usr/bin/env python3
"""
Command-line walkable surface and jump report for a JSON scene.
"""

import argparse
import logging
import sys

from .config import AnalysisConfig
from .constants.player_constants import ALL_LAYERS
from .errors import SceneFormatError
from .player import PlayerParameters
from .reachability.jump_model import JumpEnvelope
from .reachability.jump_tester import JumpTester
from .scene.box_sweep_world import BoxSweepWorld
from .scene.scene_loader import load_scene
from .sinks import LoggingDiagnostics
from .surfaces.surface_catalog import SurfaceCatalog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Report walkable and jump-reachable surfaces of a scene")
    parser.add_argument("scene", help="Scene JSON file to analyze")
    parser.add_argument(
        "--attached",
        nargs="*",
        default=None,
        help="Names of the solids to jump from (default: the scene's 'attached' list)",
    )
    parser.add_argument(
        "--layer-mask",
        type=lambda s: int(s, 0),
        default=ALL_LAYERS,
        help="Bitmask of collision layers taking part in the analysis",
    )
    parser.add_argument("--render", default=None, help="Write a PNG render of the result")
    parser.add_argument("--width", type=int, default=800, help="Render width in pixels")
    parser.add_argument("--height", type=int, default=600, help="Render height in pixels")
    parser.add_argument("--no-arcs", action="store_true", help="Do not draw jump arcs")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _print_faces(title, faces):
    print(f"{title} ({len(faces)}):")
    for face in faces:
        print(f"  {face}")


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = AnalysisConfig.from_args(args)

    try:
        description = load_scene(args.scene)
    except (OSError, SceneFormatError) as e:
        print(f"❌ Could not load scene: {e}", file=sys.stderr)
        return 1

    player = description.player or PlayerParameters()
    scene = description.scene
    diagnostics = LoggingDiagnostics()

    renderer = None
    if config.render_path:
        from .visualization.face_renderer import FaceRenderConfig, FaceRenderer

        renderer = FaceRenderer(FaceRenderConfig(size=config.render_size))

    catalog = SurfaceCatalog(diagnostics=diagnostics, visualization=renderer)
    sweeper = BoxSweepWorld(scene, contact_skin=config.contact_skin)
    tester = JumpTester(catalog, scene, sweeper, diagnostics, visualization=renderer, config=config)

    names = args.attached if args.attached is not None else description.attached
    attached = []
    for name in names:
        solid = scene.find(name)
        if solid is None:
            diagnostics.warning(f"No solid named {name!r} in the scene")
        else:
            attached.append(solid)

    if attached:
        reachable = tester.test_jumps(attached, player)
    else:
        catalog.rebuild(scene, sweeper, player, config)
        reachable = []

    if catalog.player is None:
        print("❌ Walkable surfaces could not be computed", file=sys.stderr)
        return 1

    _print_faces("Walkable faces", catalog.faces)
    if attached:
        _print_faces("Attached faces", tester.attached_faces())
        _print_faces("Reachable faces", reachable)

    if renderer is not None:
        if config.draw_jump_arcs:
            renderer.set_jump_context(tester.attached_faces(), JumpEnvelope.from_player(player))
        renderer.save(config.render_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
