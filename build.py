"""
Build a standalone FocusTimer bundle with PyInstaller.

Usage: python build.py   (requires the "build" extra)

The activity samplers are imported lazily by the factory, so each one is
listed as a hidden import. Platform libraries that cannot be used on the
build host are excluded to keep the bundle small.
"""

import subprocess
import sys
from pathlib import Path

APP_NAME = "FocusTimer"
ENTRY_POINT = "main.py"

DATA_DIRS = [
    ("focustimer/resources/templates", "focustimer/resources/templates"),
]

SAMPLER_MODULES = [
    "focustimer.infra.activity.windows_sampler",
    "focustimer.infra.activity.macos_sampler",
    "focustimer.infra.activity.linux_sampler",
]

# Modules pulled in by pywin32 and pyobjc respectively
WINDOWS_ONLY = ["win32gui", "win32process", "win32api", "pywintypes"]
MACOS_ONLY = ["AppKit", "Foundation", "objc"]


def pyinstaller_args(platform: str = sys.platform) -> list:
    """Assemble the PyInstaller command line for the given sys.platform value"""
    # --add-data uses ";" on Windows and ":" elsewhere
    sep = ";" if platform == "win32" else ":"

    args = [
        "PyInstaller",
        "--noconfirm",
        "--clean",
        "--windowed",  # Tray app, no console window
        f"--name={APP_NAME}",
    ]
    args += [f"--add-data={src}{sep}{dst}" for src, dst in DATA_DIRS]
    args += [f"--hidden-import={module}" for module in SAMPLER_MODULES]

    excluded = []
    if platform != "win32":
        excluded += WINDOWS_ONLY
    if platform != "darwin":
        excluded += MACOS_ONLY
    args += [f"--exclude-module={module}" for module in excluded]

    args.append(ENTRY_POINT)
    return args


def main():
    """Build the application using PyInstaller"""
    project_root = Path(__file__).parent
    args = pyinstaller_args()

    print("=" * 50)
    print(f"Building {APP_NAME} for {sys.platform}...")
    print(f"Command: {' '.join(args)}")
    print("=" * 50)

    try:
        subprocess.run([sys.executable, "-m", "PyInstaller", "--version"], check=True, capture_output=True)
        subprocess.run([sys.executable, "-m"] + args, check=True, cwd=project_root)
    except subprocess.CalledProcessError as e:
        print(f"\nError: Build failed with exit code {e.returncode}")
        print("Ensure 'pyinstaller' is installed: pip install -e .[build]")
        sys.exit(1)
    except FileNotFoundError:
        print("\nError: PyInstaller not found.")
        print("Please install it: pip install -e .[build]")
        sys.exit(1)

    print("\nBuild successful!")
    print(f"Output is located at: {project_root / 'dist' / APP_NAME}")


if __name__ == "__main__":
    main()
