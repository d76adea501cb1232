"""Deterministic auto battler: board model, targeting rule and battle resolver."""
