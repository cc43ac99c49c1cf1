#!/usr/bin/env python3
import logging
import os
import sys
from gamelistsite import create_app, ensure_root
from gamelistsite.building import run

def _resolve_target_root(argv) -> str:
    if len(argv) != 2:
        raise SystemExit(f"usage: {os.path.basename(argv[0])} <target-root>")
    return os.path.abspath(argv[1])

def main(argv=None) -> None:
    argv = sys.argv if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    target_root = _resolve_target_root(argv)
    ensure_root(target_root)
    app = create_app(target_root)
    run(app)

if __name__ == "__main__":
    main()
