"""``python -m fhevm_scaffold example|category <key> <output-path>``."""

from fhevm_scaffold.cli import main

if __name__ == "__main__":
    main()
