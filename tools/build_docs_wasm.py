"""
Rebuild the docs site wasm bundle into docs/pkg/, whether or not it already exists.

Usage (from the repository root):
  uv run python -m tools.build_docs_wasm
  uv run python -m tools.build_docs_wasm --dev
"""

from __future__ import annotations

import argparse
import sys

from tools import docs_wasm


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build the docs wasm bundle into docs/pkg/.")
    parser.add_argument("--dev", action="store_true", help="Build dev profile (default is release).")
    args = parser.parse_args(argv)

    crate_manifest = docs_wasm.DOCS_DIR / "Cargo.toml"
    if not crate_manifest.exists():
        raise SystemExit(f"Missing docs crate: {crate_manifest}")

    if not docs_wasm.wasm_pack_available():
        print(docs_wasm.missing_toolchain_message(docs_wasm.PKG_FILE), file=sys.stderr)
        return 1

    profile = "dev" if args.dev else "release"
    print(f"Building {docs_wasm.OUT_NAME} ({profile})...")
    extra_args = ["--dev"] if args.dev else []
    result = docs_wasm.run_wasm_pack_build(cwd=docs_wasm.DOCS_DIR, extra_args=extra_args)
    if not result.ok:
        return docs_wasm.report_build_failure(result)

    if not docs_wasm.PKG_FILE.exists():
        raise SystemExit(f"Build did not produce pkg: {docs_wasm.PKG_FILE}")

    print(f"OK: wrote {docs_wasm.PKG_FILE}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
