"""Common utility functions for test scripts."""

import sys
import traceback
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from data import SEPARATOR_LINE_LENGTH

SECTION_SEPARATOR = "=" * SEPARATOR_LINE_LENGTH


def run_test_functions(title, tests):
    """Run zero-argument test functions, printing one line per test.

    Returns:
        True if every test passed
    """
    print(SECTION_SEPARATOR)
    print(f"[INFO] {title}")
    print(SECTION_SEPARATOR)

    failed = []
    for test in tests:
        try:
            test()
            print(f"    [OK] {test.__name__}")
        except Exception:
            print(f"    [FAIL] {test.__name__}")
            traceback.print_exc()
            failed.append(test.__name__)

    print()
    print(f"Overall Results: {len(tests) - len(failed)}/{len(tests)} tests passed")
    if failed:
        print("[FAIL] Some tests failed")
        return False
    print("[SUCCESS] All tests passed!")
    return True


def main_for(module_globals, title):
    """Script entry point: run every test_* function of a module and exit."""
    tests = [
        obj
        for name, obj in module_globals.items()
        if name.startswith("test_") and callable(obj)
    ]
    success = run_test_functions(title, tests)
    sys.exit(0 if success else 1)


def solid_image(width, height, color=(255, 0, 0, 255)):
    """Fully opaque RGBA image."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :] = color
    return pixels


def bordered_image(width, height, left, top, right, bottom, color=(0, 128, 255, 255)):
    """Transparent image with an opaque rectangle inside the given borders."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[top : height - bottom, left : width - right] = color
    return pixels


def noisy_image(width, height, seed):
    """Image with random colors and a random mix of opaque and clear pixels."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    clear = rng.random((height, width)) < 0.3
    pixels[clear, 3] = 0
    return pixels
