"""Conversion stages, one module per step. Importing a module registers its stage."""
