"""
Training Doctrine (FINAL / FROZEN)

Every tutorial trains exactly ONE model, in ONE batch fit, on a CLOSED,
FINITE dataset that fits comfortably in memory.

------------------------------------------------------------
Shape of a training run
------------------------------------------------------------

1. acquire rows (text file or in-memory records)
2. build a declarative pipeline: feature transforms → one trainer
3. fit
4. transform held-out rows, compute metrics
5. single and batch predictions
6. optionally persist the fitted pipeline

Semantics:
- The fitted scikit-learn Pipeline IS the model. Featurisation is part
  of it, so a persisted model accepts raw records.
- Trainers are black boxes. This package selects and configures them;
  it never re-derives a learning algorithm.
- Runs are reproducible for a fixed seed.

Non-goals:
- Online / incremental training
- Hyper-parameter search
- Distributed or unbounded datasets
"""
