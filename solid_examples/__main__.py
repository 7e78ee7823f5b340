"""Allow running the package with ``python -m solid_examples``."""
from solid_examples.cli.main import main

if __name__ == "__main__":
    main()
