#!/usr/bin/env python3
"""
Test runner for the platformtester surface and reachability tests.

Runs each test module in its own pytest process and prints a summary.
Pass module names to run a subset.
"""

import sys
import os
import subprocess
import time

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

TEST_FILES = [
    "test_face_geometry.py",
    "test_face_extractor.py",
    "test_box_sweep_world.py",
    "test_face_clipper.py",
    "test_surface_catalog.py",
    "test_reachability.py",
    "test_jump_tester.py",
    "test_scene_loader_and_cli.py",
    "test_face_renderer.py",
]


def run_tests(test_files=None):
    """Run the selected test modules and return a process exit code."""
    test_files = test_files or TEST_FILES
    tests_dir = os.path.dirname(os.path.abspath(__file__))
    print(f"Running {len(test_files)} platformtester test modules...")
    print("=" * 60)

    results = {}
    for test_file in test_files:
        print(f"\n{test_file}")
        print("-" * 40)
        start_time = time.time()
        result = subprocess.run(
            [sys.executable, "-m", "pytest", os.path.join(tests_dir, test_file), "-v", "--tb=short"],
            cwd=os.path.dirname(tests_dir),
        )
        duration = time.time() - start_time
        results[test_file] = (result.returncode == 0, duration)

    print("\n" + "=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)
    for test_file, (passed, duration) in results.items():
        status_icon = "✅" if passed else "❌"
        print(f"{status_icon} {test_file:<40} ({duration:.2f}s)")

    failed = [name for name, (passed, _) in results.items() if not passed]
    if failed:
        print(f"\n❌ {len(failed)} of {len(results)} modules failed")
        return 1
    print("\n✅ All tests passed!")
    return 0


if __name__ == "__main__":
    sys.exit(run_tests(sys.argv[1:]))
