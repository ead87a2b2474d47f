"""
Model Train Engines (FINAL / FROZEN)

Each engine defines COMPLETE training semantics for one tutorial:
- which columns are features, which column is the label
- the transform chain
- the trainer and its hyper-parameters
- the shape of prediction output columns

A ModelTrainEngine MUST NOT:
- Guess label dtype or semantics
- Read files (data arrives as DataFrames)

On success, every training run produces a fitted Pipeline whose
input contract is `engine.feature_columns`.
"""
