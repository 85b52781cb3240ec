from __future__ import annotations
import sys
from picker.__main__ import main

# `python -m picker_ui [flags]` serves the web picker: same flags as `python -m picker --web`
if __name__ == "__main__":
    sys.exit(main(["--web", *sys.argv[1:]]))
