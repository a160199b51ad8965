"""Belt eligibility evaluation and promotion application.

Responsibilities:
  - Provide the evaluator, promotion applier and stripe award for pure, per-student decisions.
  - Must not read or write storage; consumes a snapshot supplied by the caller.
"""
