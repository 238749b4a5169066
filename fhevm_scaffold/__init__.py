"""FHEVM example scaffolder.

Generates standalone Hardhat projects for one FHEVM example, or for every
example in a category, from the static registry in ``fhevm_scaffold.registry``.
"""

__version__ = "0.1.0"
