from __future__ import annotations

from dojo_installer.main import main

if __name__ == "__main__":
    raise SystemExit(main())
