"""Core rule-set evaluation utilities.

Responsibilities:
  - Provide the evaluator, report and trace types for deterministic rule evaluation.
  - Must not read files or the environment; consumes an in-memory reference.
"""
