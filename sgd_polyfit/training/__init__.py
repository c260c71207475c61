"""
Training Doctrine (FINAL)

One training run == one fixed-length SGD fit of a polynomial on a
closed, finite, in-memory dataset.

Semantics:
- The dataset is generated once per pipeline run and never mutated.
- Every configured (learn_rate, degree) pair is trained on that same
  dataset, in configuration order.
- A run always performs exactly `iterations` full passes.
  There is no convergence detection, no mini-batching, no learning-rate
  schedule and no regularization.

Reproducibility:
- All randomness flows through ONE RandomSource owned by the pipeline.
- Draw order: dataset noise first, then the initial coefficients of
  each run in order.
- Same seed + same configuration == bit-identical error traces.

Non-goals:
- Intermediate checkpoints
- Resuming a run
"""
