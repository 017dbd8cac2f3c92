#!/usr/bin/env python3
"""Test runner for Onepager: the pytest suite, then a smoke build of the starter project."""

import sys
import subprocess
import os
import tempfile
from pathlib import Path


def run_tests():
    """Run all tests with coverage reporting."""
    print("🧪 Running Onepager Test Suite")
    print("=" * 50)

    result = subprocess.run([
        sys.executable, "-m", "pytest",
        "tests/",
        "-v",
        "--cov=onepager_pkg",
        "--cov-report=term-missing",
        "--cov-fail-under=80"
    ], check=False)

    if result.returncode == 0:
        print("\n✅ All tests passed!")
        return True
    print(f"\n❌ Tests failed with return code {result.returncode}")
    return False


def run_starter_build():
    """Create a starter project with --init and build it with the installed CLI module."""
    print("\n🏗️  Building the starter project...")
    cli = [sys.executable, "-m", "onepager_pkg.cli"]

    with tempfile.TemporaryDirectory() as project_dir:
        for args in (["--init", "yml"], [], ["--minifier", "library"]):
            result = subprocess.run(cli + ["--root", project_dir] + args,
                                    capture_output=True, text=True, check=False)
            if result.returncode != 0:
                print(f"❌ onepager {' '.join(args)} failed: {result.stderr.strip()}")
                return False

        expected = ["index.html", "sitemap.xml", "sitemap.xsl",
                    "assets/css/styles.min.css", "assets/js/scripts.min.js"]
        missing = [name for name in expected if not (Path(project_dir) / name).exists()]
        if missing:
            print(f"❌ Starter build did not write: {', '.join(missing)}")
            return False

    print("✅ Starter project builds with both minifier engines")
    return True


def main():
    """Main test runner."""
    os.chdir(Path(__file__).parent)

    success = run_tests()
    if not run_starter_build():
        success = False

    print("\n" + "=" * 50)
    print("🎉 All checks passed!" if success else "💥 Some checks failed. Please review the output above.")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
