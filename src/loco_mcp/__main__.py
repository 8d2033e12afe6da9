"""Allow ``python -m loco_mcp``."""

from .main import main

if __name__ == "__main__":
    main()
