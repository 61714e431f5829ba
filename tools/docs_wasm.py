"""
Shared wasm-pack plumbing for the docs site bundle (docs/pkg/).

All paths are resolved from this file's location, never from the caller's cwd.
"""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
DOCS_DIR = PROJECT_ROOT / "docs"
OUT_DIR_NAME = "pkg"
OUT_NAME = "bahlilui_docs"
PKG_FILE = DOCS_DIR / OUT_DIR_NAME / f"{OUT_NAME}.js"

WASM_PACK = "wasm-pack"
BUILD_ARGS = ["build", "--target", "web", "--out-dir", OUT_DIR_NAME, "--out-name", OUT_NAME]


@dataclass(frozen=True)
class ToolResult:
    # returncode is None when the child never produced a numeric status
    # (killed by a signal, or failed to launch).
    returncode: int | None
    signal: int | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _to_result(returncode: int) -> ToolResult:
    if returncode < 0:
        return ToolResult(returncode=None, signal=-returncode)
    return ToolResult(returncode=returncode)


def wasm_pack_available() -> bool:
    try:
        proc = subprocess.run(
            [WASM_PACK, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return proc.returncode == 0


def run_wasm_pack_build(*, cwd: Path | None = None, extra_args: list[str] | None = None) -> ToolResult:
    """Run `wasm-pack build ...` with inherited stdio so progress is visible live."""
    cmd = [WASM_PACK, *BUILD_ARGS, *(extra_args or [])]
    try:
        proc = subprocess.run(cmd, cwd=str(cwd or DOCS_DIR), check=False)
    except OSError:
        return ToolResult(returncode=None)
    return _to_result(proc.returncode)


def exit_code_for(result: ToolResult) -> int:
    if result.ok:
        return 0
    return result.returncode or 1


def missing_toolchain_message(pkg_file: Path) -> str:
    return (
        f"Missing {pkg_file} and {WASM_PACK} is not available. "
        f"Run {WASM_PACK} build locally and commit docs/{OUT_DIR_NAME}/ for Vercel."
    )


def report_build_failure(result: ToolResult) -> int:
    """Print the build failure to stderr and return the exit code to use."""
    if result.signal is not None:
        print(f"{WASM_PACK} build failed (killed by signal {result.signal}).", file=sys.stderr)
    else:
        print(f"{WASM_PACK} build failed.", file=sys.stderr)
    return exit_code_for(result)
