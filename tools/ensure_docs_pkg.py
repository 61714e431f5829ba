"""
Pre-build guard for the docs site: make sure docs/pkg/bahlilui_docs.js exists.

- Present: skip (exit 0).
- Missing and wasm-pack unavailable: fail with instructions (exit 1).
- Missing and wasm-pack available: build it in docs/ and propagate wasm-pack's exit status.

Usage (from the repository root):
  uv run python -m tools.ensure_docs_pkg
"""

from __future__ import annotations

import sys

from tools import docs_wasm


def main() -> int:
    if docs_wasm.PKG_FILE.exists():
        print("Found pkg artifacts. Skipping wasm-pack build on CI.")
        return 0

    if not docs_wasm.wasm_pack_available():
        print(docs_wasm.missing_toolchain_message(docs_wasm.PKG_FILE), file=sys.stderr)
        return 1

    result = docs_wasm.run_wasm_pack_build(cwd=docs_wasm.DOCS_DIR)
    if not result.ok:
        return docs_wasm.report_build_failure(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
